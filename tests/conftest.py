import os

# Qt widgets need a platform plugin; run headless under pytest.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
