"""Configure test suite environment"""
import os
import sys

# Make the project root importable so tests can use ``src.`` imports
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

# Keep powertools output quiet and deterministic during tests
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "cycle_insights_test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
