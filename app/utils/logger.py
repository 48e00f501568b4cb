import os
import sys
import logging

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
project_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
logging_dir = os.getenv("LOG_DIR", os.path.join(project_dir, "logs"))
logging_path = os.path.join(logging_dir, "tutorialgenerator.log")
os.makedirs(logging_dir, exist_ok=True)

console_handler = logging.StreamHandler(sys.stdout)

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path, encoding="utf-8"),
        console_handler
    ]
)

# Shared application logger, imported everywhere as ``logging``
logging = logging.getLogger('tutorialgenerator')


def log_to_stderr():
    """Send console log output to stderr so stdout carries only command output."""
    console_handler.setStream(sys.stderr)
