"""
bindays - Next refuse/recycling collection for a street, read from xlsx schedules
"""
