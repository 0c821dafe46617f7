import os

# ==== parser limits ====
# maximum number of tags evaluated in a single parse
MAX_ITERATIONS = int(os.getenv("TAG_MAX_ITERATIONS", 1000))
# maximum length of the working string; parsing stops once it grows past this
MAX_LENGTH = int(os.getenv("TAG_MAX_LENGTH", 40_000))
# final output is cut to this many characters (a chat message)
MAX_OUTPUT = int(os.getenv("TAG_MAX_OUTPUT", 2000))

# ---- async worker ----
WORKER_NAME = os.getenv("TAG_WORKER_NAME", "tag-parser")

# ---- monitoring ----
LOG_LEVEL = os.getenv("TAG_LOG_LEVEL", "INFO").upper()
