"""Runtime configuration for the dealership application."""

import os
from dotenv import load_dotenv

load_dotenv()

# Flat file holding one vehicle per line
INVENTORY_FILE = os.getenv("DEALERSHIP_INVENTORY_FILE", "car.txt")

LOG_LEVEL = os.getenv("DEALERSHIP_LOG_LEVEL", "WARNING").upper()
