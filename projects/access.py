from core.permissions import is_admin
from .models import Project


def find_project_for_user(project_id, user):
    """Look up a project the user may read, or None.

    Admins see every project, everyone else only the ones they are a member of.
    """
    projects = Project.objects.filter(pk=project_id)
    if not is_admin(user):
        projects = projects.filter(members=user)
    return projects.first()
