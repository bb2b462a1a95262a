import logging
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = getattr(logging, os.getenv('LIBRARY_LOG_LEVEL', 'INFO').upper(), logging.INFO)
LOG_FORMAT = os.getenv('LIBRARY_LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
# No file handler unless a path is given
LOG_FILE_PATH = os.getenv('LIBRARY_LOG_FILE') or None
