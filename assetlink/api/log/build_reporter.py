"""Create the reporter used by CLI commands."""

from ..config.RootConfig import RootConfig
from .logfile_sink import logfile_sink
from .Reporter import Reporter, Sink


def build_reporter(*extra_sinks: Sink) -> Reporter:
    """Reporter writing to the assetlink logfile plus any extra sinks."""
    return Reporter(sinks=[logfile_sink(RootConfig.get_logfile_path()), *extra_sinks])
