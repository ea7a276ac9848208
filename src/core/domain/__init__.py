"""Pipeline references, patch options and command outcomes.

The pipeline document itself is never modelled: it stays whatever JSON the
gate returns.
"""
