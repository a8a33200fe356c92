"""
Golden Trace Tests - audit record drift detection.

Each directory under ``snapshots/`` is a committed case: ``golden_input.json``
plus the blessed ``expected_audit.json``. The tests run the real pipeline on a
copy and require byte-identical output.

Re-bless fixtures only when intentionally changing guard, decision or
serialization logic (``vojker-golden --bless <case_dir>``).
"""
