# 64 bits minus the sign bit
USABLE_BITS = 63

DEFAULT_MAX_MACHINE_ID = 1024
DEFAULT_MAX_SEQUENCE = 4096
