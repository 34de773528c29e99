from django.conf import settings


def is_admin(user):
    """Superusers and members of the admin group see every project."""
    if user is None:
        return False
    if user.is_superuser:
        return True
    return user.groups.filter(name=settings.ADMIN_GROUP_NAME).exists()
