"""problem-bench: planner benchmark run assembly.

Builds the object graph of a benchmark run: solver benchmarks, the unified
list of shared problem benchmarks and one single benchmark per
solver/problem pairing.
"""

__version__ = "0.1.0"
