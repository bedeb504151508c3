# config.py
# Default constants for the matching algorithms, the benchmark protocol and the case loader.

# === BENCHMARK PROTOCOL ===
TRIAL_RUNS = 5     # timed invocations per (algorithm, case)
WARMUP_RUNS = 1    # untimed invocations before timing starts

# === RABIN-KARP ===
# Small prime on purpose: collisions happen and every hash hit is verified.
RABIN_KARP_BASE = 256
RABIN_KARP_PRIME = 101

# === HYBRID (Sunday + Raita) ===
HYBRID_NAIVE_CUTOFF = 2   # patterns this short fall back to a plain scan

# === SELECTOR HEURISTICS ===
ALPHABET_SCAN_LIMIT = 20        # only the first N pattern characters are inspected
SMALL_ALPHABET_THRESHOLD = 5    # fewer distinct characters than this = DNA/binary-like
TINY_TEXT_LENGTH = 20
TINY_PATTERN_LENGTH = 3

# === CASE FILES ===
TESTCASES_DIR = "testcases"
SHARED_DIR = "shared"
HIDDEN_DIR = "hidden"
DOCUMENT_EXTENSIONS = (".pdf", ".docx", ".txt")
