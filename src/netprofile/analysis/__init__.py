"""Timing analysis: summarizing, combining and assembling network profiles."""

from .assembler import assemble_network_profile
from .combiner import combine_rtt_and_server_response_time
from .statistics import merge_intervals, summarize_by_origin, summarize_samples

__all__ = [
    "assemble_network_profile",
    "combine_rtt_and_server_response_time",
    "merge_intervals",
    "summarize_by_origin",
    "summarize_samples",
]
