import os

from dotenv import load_dotenv

load_dotenv()

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

LOG_LEVEL = os.getenv("KANATYPE_LOG_LEVEL", "INFO").upper()

# Run the structural checks over the kana table when it is first imported
VALIDATE_TABLE = os.getenv("KANATYPE_VALIDATE_TABLE", "0").lower() in ("1", "true", "yes")

# Scoring weights
POINTS_PER_HIT = int(os.getenv("KANATYPE_POINTS_PER_HIT", "10"))
POINTS_PER_KANA = int(os.getenv("KANATYPE_POINTS_PER_KANA", "100"))
