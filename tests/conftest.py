import os

# telemetry configures itself on import; keep test output free of log lines
os.environ.setdefault("CLEAN_INDENT_DISABLE_CONSOLE", "1")
os.environ.setdefault("CLEAN_INDENT_LOG_LEVEL", "ERROR")
