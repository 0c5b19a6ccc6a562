"""Time tracker service: users, tasks and worklog accounting."""
