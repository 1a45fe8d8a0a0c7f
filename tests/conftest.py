import os

# keep the app's engine off the filesystem during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
