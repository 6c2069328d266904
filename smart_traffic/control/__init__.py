"""
Control module: signal phase state machine, timing policy and its collaborators.
"""
