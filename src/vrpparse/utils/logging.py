"""Console logging for the reader and per-file progress for the inspection CLI."""
import logging
from collections import Counter
from tqdm import tqdm

class Colors:
    """ANSI color codes for console output."""
    GRAY = '\033[37m'
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    BOLD = '\033[1m'
    RESET = '\033[0m'

LEVEL_COLORS = {
    'DEBUG': Colors.GRAY,
    'INFO': Colors.CYAN,
    'WARNING': Colors.YELLOW,
    'ERROR': Colors.RED,
    'CRITICAL': Colors.RED + Colors.BOLD,
}

# Outcome of reading one instance file: (color, mark)
OUTCOMES = {
    'parsed': (Colors.GREEN, '✓'),
    'warnings': (Colors.YELLOW, '⚠'),
    'failed': (Colors.RED, '✗'),
}

def _source(name: str) -> str:
    """Logger name without the package prefix, e.g. ``parsers.classifiers``."""
    return name.split('.', 1)[1] if name.startswith('vrpparse.') else name

class ReaderFormatter(logging.Formatter):
    """Colour by level and tag each line with the reader stage that logged it.

    A warning from the validator renders as ``[validation] Line 4: ...`` so a
    file's parse log reads top to bottom in pipeline order.
    """
    def format(self, record):
        color = LEVEL_COLORS.get(record.levelname, Colors.RESET)
        text = f"[{_source(record.name)}] {record.getMessage()}"
        return f"{color}{text}{Colors.RESET}"

def setup_logging(level=logging.INFO):
    """Route all loggers to one colour console handler at ``level``."""
    logger = logging.getLogger()
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(ReaderFormatter())
    logger.addHandler(console)

class InspectionProgress:
    """tqdm bar over instance files that tallies how each file was read."""
    def __init__(self, paths):
        self.counts = Counter()
        self.pbar = tqdm(
            total=len(paths),
            desc="Reading instances",
            unit="file",
        )

    def record(self, message, outcome='parsed'):
        """Print one file's line above the bar and count its outcome."""
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome {outcome!r}. Expected one of {sorted(OUTCOMES)}")
        color, mark = OUTCOMES[outcome]
        self.pbar.write(f"{color}{mark} {message}{Colors.RESET}")
        self.counts[outcome] += 1
        self.pbar.update(1)

    def summary(self) -> str:
        return (
            f"{self.counts['parsed']} parsed, "
            f"{self.counts['warnings']} with warnings, "
            f"{self.counts['failed']} failed"
        )

    def close(self):
        """Write the outcome tally and release the bar."""
        color = Colors.RED if self.counts['failed'] else Colors.GREEN
        self.pbar.write(f"{color}{self.summary()}{Colors.RESET}")
        self.pbar.close()
