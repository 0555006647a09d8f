import os

# Cells on the tape (0x2000 = 8192)
TAPE_SIZE = 0x2000

# None means no limit on the filtered program length
MAX_PROGRAM_SIZE = None

# Value stored by ',' once the input is exhausted
EOF_BYTE = 0

VALID_CHARS = "+-><.,[]"

LOG_LEVEL = os.environ.get("BF_LOG_LEVEL", "WARNING").upper()
