from django.conf import settings
from django.db import models


class Account(models.Model):
    """
    Account status for a user who signs in with basic authentication

    Passwords stay with django.contrib.auth; this only tracks whether the
    account has been verified and whether it has been deactivated.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='account'
    )
    verified = models.BooleanField(default=False)
    deactivated = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.get_username()} (verified: {self.verified}, deactivated: {self.deactivated})"
