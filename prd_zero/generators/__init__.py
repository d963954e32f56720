# prd_zero/generators/__init__.py
"""Document generators for completed sessions."""

from prd_zero.generators.files import create_session_directory, generate_file_name
from prd_zero.generators.prd import PRDGenerator
from prd_zero.generators.roadmap import RoadmapGenerator

__all__ = ["PRDGenerator", "RoadmapGenerator", "create_session_directory", "generate_file_name"]
