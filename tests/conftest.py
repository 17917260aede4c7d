import os

os.environ.setdefault("MOCK_DELAY_MS", "0")
os.environ.setdefault("CORE_ENGINE_URL", "")
