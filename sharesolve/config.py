"""Global configuration for ShareSolve."""

import os

# ---------- Digit alphabet (case-insensitive on input) ----------
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGIT_ALPHABET)  # 36

# ---------- Reconstruction parameters ----------
# Smallest threshold K a loaded share set may declare.  reconstruct() itself
# still accepts a single point (constant polynomial).
MIN_THRESHOLD = int(os.environ.get("SHARESOLVE_MIN_THRESHOLD", "2"))

# ---------- Service ----------
# When set, the demo posts to a running service instead of solving in-process.
SERVICE_URL = os.environ.get("SHARESOLVE_URL", "")
LOG_LEVEL = os.environ.get("SHARESOLVE_LOG_LEVEL", "INFO")
