"""In-memory ordered task list with a console front end."""
