"""Users app package.

Accounts, the credential store, the stateless session issuer and the
authorization gate. Use ``apps.users.models.User`` as the AUTH_USER_MODEL
throughout the project.
"""
