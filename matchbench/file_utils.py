# file_utils.py
# Loads test cases from JSON files and builds cases from PDF/DOCX/TXT documents.

import os
import json
from dataclasses import dataclass, field
from typing import List

import docx
import pdfplumber

from .algorithms.base import indices_to_string
from .algorithms.brute_force import naive_search
from .config import HIDDEN_DIR, SHARED_DIR, TESTCASES_DIR
from .models import TestCase

REQUIRED_FIELDS = ("name", "text", "pattern", "expected")


# ---------------------- Documents ----------------------
def extract_text_from_pdf(pdf_file_path):
    """Extracts all text from a PDF file."""
    text = ""
    try:
        with pdfplumber.open(pdf_file_path) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text += page_text + "\n"
        return text
    except Exception as e:
        print(f"[Error] Failed reading PDF: {pdf_file_path} -> {e}")
        return None


def extract_text_from_docx(docx_file_path):
    """Extracts all text from a DOCX file."""
    text = ""
    try:
        doc = docx.Document(docx_file_path)
        for para in doc.paragraphs:
            text += para.text + "\n"
        return text
    except Exception as e:
        print(f"[Error] Failed reading DOCX: {docx_file_path} -> {e}")
        return None


def extract_text(path):
    """Dispatches on the file extension. Returns None when the file cannot be read."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".pdf":
        return extract_text_from_pdf(path)
    if ext == ".docx":
        return extract_text_from_docx(path)
    if ext == ".txt":
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            print(f"[Error] Failed reading text file: {path} -> {e}")
            return None
    print(f"[Warning] Unsupported document type: {os.path.basename(path)}")
    return None


def build_document_cases(path, patterns, case_sensitive=True):
    """
    One test case per pattern, searched in the document's text.

    Expected results come from the naive scan, so they are correct by
    construction. Returns an empty list if the document cannot be read.
    """
    text = extract_text(path)
    if not text:
        return []
    if not case_sensitive:
        text = text.lower()

    base = os.path.splitext(os.path.basename(path))[0]
    cases = []
    for pattern in patterns:
        if not case_sensitive:
            pattern = pattern.lower()
        expected = indices_to_string(naive_search(text, pattern))
        cases.append(TestCase(f"{base}: {pattern}", text, pattern, expected))
    return cases


# ---------------------- JSON test cases ----------------------
@dataclass(frozen=True)
class CaseCollection:
    """Shared cases first, then hidden ones, with the index ranges of each."""
    cases: List[TestCase] = field(default_factory=list)
    shared_indices: List[int] = field(default_factory=list)
    hidden_indices: List[int] = field(default_factory=list)

    def __len__(self):
        return len(self.cases)


def load_case_file(path):
    """Reads one {"name", "text", "pattern", "expected"} object. Raises ValueError if a field is missing."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Invalid JSON format in {os.path.basename(path)}: expected an object")
    missing = [key for key in REQUIRED_FIELDS if not isinstance(data.get(key), str)]
    if missing:
        raise ValueError(
            f"Invalid JSON format in {os.path.basename(path)}. "
            f"Required fields: {', '.join(REQUIRED_FIELDS)} (missing: {', '.join(missing)})"
        )
    return TestCase(data["name"], data["text"], data["pattern"], data["expected"])


def load_cases_from_directory(directory):
    """Loads every *.json file in `directory`, sorted by filename. Broken files are reported and skipped."""
    cases = []
    try:
        files = sorted(f for f in os.listdir(directory) if f.lower().endswith(".json"))
    except OSError as e:
        print(f"[Error] Failed reading directory {directory} -> {e}")
        return cases

    for filename in files:
        file_path = os.path.join(directory, filename)
        if not os.path.isfile(file_path):
            continue
        try:
            cases.append(load_case_file(file_path))
        except (OSError, ValueError) as e:
            print(f"[Error] Failed loading test case from {file_path} -> {e}")
    return cases


def resolve_case_directory(root, sub_dir):
    """Looks for <root>/testcases/<sub_dir>, then one level up. None if neither exists."""
    candidates = [
        os.path.join(root, TESTCASES_DIR, sub_dir),
        os.path.join(root, os.pardir, TESTCASES_DIR, sub_dir),
    ]
    for candidate in candidates:
        if os.path.isdir(candidate):
            return candidate

    print(f"[Warning] Directory does not exist: {TESTCASES_DIR}/{sub_dir}")
    for candidate in candidates:
        print(f"          Tried: {os.path.abspath(candidate)}")
    return None


def _load_sub_dir(root, sub_dir):
    directory = resolve_case_directory(root, sub_dir)
    if directory is None:
        return []
    return load_cases_from_directory(directory)


def load_shared_cases(root="."):
    return _load_sub_dir(root, SHARED_DIR)


def load_hidden_cases(root="."):
    return _load_sub_dir(root, HIDDEN_DIR)


def load_all_cases(root="."):
    shared = load_shared_cases(root)
    hidden = load_hidden_cases(root)
    return CaseCollection(
        cases=shared + hidden,
        shared_indices=list(range(len(shared))),
        hidden_indices=list(range(len(shared), len(shared) + len(hidden))),
    )
