"""Users app package.

Defines the ParkBoard user model (email login, resident/admin role,
community membership) together with signup, login and own-profile
endpoints. Use ``apps.users.models.User`` as the AUTH_USER_MODEL throughout
the project.
"""
