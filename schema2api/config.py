import os
from dotenv import load_dotenv

# Load .env (default) or a custom file via ENV_FILE
load_dotenv(dotenv_path=os.getenv("ENV_FILE", ".env"), override=False)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8081"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
