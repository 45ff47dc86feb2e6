import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Fusion Brain API Configuration
FUSIONBRAIN_API_KEY = os.getenv("FUSIONBRAIN_API_KEY")
FUSIONBRAIN_SECRET_KEY = os.getenv("FUSIONBRAIN_SECRET_KEY")
FUSIONBRAIN_API_URL = os.getenv("FUSIONBRAIN_API_URL", "https://api-key.fusionbrain.ai/")

# API Timeout Configuration
FUSIONBRAIN_REQUEST_TIMEOUT = float(
    os.getenv("FUSIONBRAIN_REQUEST_TIMEOUT", "30")
)  # seconds

# Polling Configuration
GENERATION_POLL_ATTEMPTS = int(os.getenv("GENERATION_POLL_ATTEMPTS", "20"))
GENERATION_POLL_DELAY_MS = int(
    os.getenv("GENERATION_POLL_DELAY_MS", "5000")
)  # milliseconds between status checks

# Output Configuration
IMAGE_OUTPUT_DIR = os.getenv("IMAGE_OUTPUT_DIR", "output")
IMAGE_FILE_PREFIX = os.getenv("IMAGE_FILE_PREFIX", "kandinsky")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "logs/kandinsky.log")
