"""
Accounts App - Snackbox users

Email-based custom user model and JWT login for the snackbox API.
"""
