"""Built-in formatters, all registered by name on import."""

from specreport.formatters.failed_examples import FailedExamplesFormatter
from specreport.formatters.progress import ProgressFormatter
from specreport.formatters.registry import register_formatter
from specreport.formatters.silent import SilentFormatter
from specreport.formatters.specdoc import SpecdocFormatter

register_formatter("silent", SilentFormatter)
register_formatter("progress", ProgressFormatter)
register_formatter("specdoc", SpecdocFormatter)
register_formatter("failed-examples", FailedExamplesFormatter)
