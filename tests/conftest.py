"""
Pytest configuration for year_bounds tests.

This file adds the project root to the Python path so that tests can import
year_bounds without installing the package.
"""

import sys
from pathlib import Path

# Add the project root directory to the Python path
# so tests can import year_bounds.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
