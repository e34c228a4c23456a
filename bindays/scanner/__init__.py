"""
Scanner module for finding the next collection in xlsx schedules

Structure:
- core/     - Cell parsing, grid search, workbook loading and the gateway
- main.py   - CLI entry point
"""
