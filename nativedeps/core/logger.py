import sys


class Colors:
    """ANSI color codes for console output."""
    INFO = "\033[94m"
    SUCCESS = "\033[92m"
    WARNING = "\033[93m"
    ERROR = "\033[91m"
    MUTED = "\033[90m"
    BOLD = "\033[1m"
    CYAN = "\033[96m"
    RESET = "\033[0m"


class Logger:
    def __init__(self):
        self.quiet = False
        self.verbose = False
        self.json_mode = False

    def cprint(self, text, color="INFO"):
        """Print colored text to console. Errors go to stderr."""
        if self.json_mode and color != "ERROR":
            return
        if self.quiet and color in ["INFO", "WARNING", "SUCCESS", "MUTED", "CYAN"]:
            return

        stream = sys.stderr if color == "ERROR" else sys.stdout
        if not stream.isatty():
            stream.write(f"{text}\n")
            return

        color_code = getattr(Colors, color.upper(), Colors.INFO)
        stream.write(f"{color_code}{text}{Colors.RESET}\n")

    def reset(self):
        self.quiet = False
        self.verbose = False
        self.json_mode = False


# Global logger instance
LOG = Logger()
cprint = LOG.cprint
