"""
Custom AutoSchema for automatic tag assignment
"""
from drf_spectacular.openapi import AutoSchema


class CustomAutoSchema(AutoSchema):
    """
    Tag endpoints by their API area when a view declares no tags of its own.
    """

    # First path segment after /api/v1/ -> tag
    path_tags = {
        'auth': 'Authentication',
        'users': 'Users',
        'salon': 'Salon',
        'public': 'Public',
        'clients': 'Clients',
        'services': 'Services',
        'staff': 'Staff',
        'appointments': 'Appointments',
        'schedules': 'Schedules',
        'finance': 'Finance',
        'billing': 'Billing',
        'platform': 'Platform',
        'support': 'Support',
    }

    def get_tags(self):
        segments = [part for part in self.path.split('/') if part]
        if len(segments) > 2 and segments[:2] == ['api', 'v1'] and segments[2] in self.path_tags:
            return [self.path_tags[segments[2]]]
        return super().get_tags()
