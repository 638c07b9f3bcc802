"""FMA ereport analyzer — per-device fault aggregation and reporting.

Modules
───────
  bucketer     — epoch seconds → UTC day key
  accumulator  — per-device class/day counts and ereport history
  aggregator   — admission filter + two-pass parse + folding
  crossref     — device path → hardware-inventory enrichment
  reporter     — text report rendering and atomic file output
  pipeline     — orchestrate the full run
  cli          — argparse entry-point
"""
