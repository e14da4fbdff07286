"""
Synthetic data generation for the Load & Trim Sheet system.

Generates load-planning workbooks for every supported aircraft:
- Loaded, empty and overloaded positions
- Safe and unsafe balance verdicts
- Complete or deliberately incomplete sheet sets

Use for:
- System testing and demos
- Exercising the API without a real load-planning export
"""

from .workbook_generator import TrimSheetWorkbookGenerator, position_labels

__all__ = [
    "TrimSheetWorkbookGenerator",
    "position_labels",
]
