import os

# settings are read at import time, so the key has to exist before app modules load
os.environ["GOOGLE_MAPS_KEY"] = "test-key"
