"""RosterDesk - administrative roster management.

Bulk CSV/Excel roster import into a single durable collection, with
change notification for every reader of the roster.

Usage:
    rosterdesk import students.xlsx
    rosterdesk list --department "Computer Science"
    rosterdesk template > roster.csv
    uvicorn rosterdesk.main:app --reload
"""

__version__ = "0.1.0"
