"""Interactive terminal front end for the explorer."""

from .input_controller import Command, ExplorerShell, parse_input
from .results_display import ProgressDots, ResultsDisplay
