APP_NAME = "confload"
ENV_PREFIX = "CONFLOAD_"

FILE_ERROR_PREFIX = "config error"
STRING_ERROR_PREFIX = "config string parsing error"
