"""Configuration management for the calculator."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

CALC_PROMPT = os.getenv("CALC_PROMPT", "Input expression: ")
RESULT_PRECISION = int(os.getenv("RESULT_PRECISION", "6"))
MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", "1000"))
SHOW_TRACE = os.getenv("SHOW_TRACE", "false").lower() in ("1", "true", "yes", "on")
