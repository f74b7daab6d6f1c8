"""
SimpleQueryBuilder - Fluent SQL statement assembly.

Composes SELECT/INSERT/UPDATE/DELETE text from chained calls, with values
inlined as escaped literals. Execution is delegated to a pluggable executor.
"""

__version__ = "0.1.0"
