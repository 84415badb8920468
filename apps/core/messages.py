"""
User-friendly messages for API responses.

These messages are designed to be:
- Simple and jargon-free
- Actionable with clear next steps
- Helpful for non-technical users
"""

# ============================================
# License / Tenancy Messages
# ============================================

LICENSE = {
    'unauthenticated': {
        'message': "We couldn't identify you. Please sign in again.",
        'next_steps': "Log in with your salon email and password.",
    },
    'no_license': {
        'message': "Your salon does not have a license yet.",
        'next_steps': "Contact support so we can activate a plan for your salon.",
    },
    'suspended': {
        'message': "Your salon license has been suspended.",
        'next_steps': "Please contact support to find out why and how to reactivate it.",
    },
    'expired': {
        'message': "Your salon license has expired.",
        'next_steps': "Renew your plan from the billing page to keep using the system.",
    },
    'expired_today': {
        'message': "Your salon license expired today.",
        'next_steps': "Renew your plan from the billing page to keep using the system.",
    },
}

# ============================================
# Scheduling Messages
# ============================================

SCHEDULING = {
    'professional_busy': (
        "{professional} already has an appointment from {start} to {end}. "
        "Please choose another time or professional."
    ),
    'crosses_midnight': (
        "This appointment would end after midnight. "
        "Please choose an earlier start time."
    ),
    'select_salon': (
        "Choose a salon to act on by sending the X-Act-As-Salon header."
    ),
}

# ============================================
# Feature Gate Messages
# ============================================

FEATURES = {
    'waiting_list': "The waiting list is available on Premium plans. Upgrade to unlock it.",
    'report_level': "This report needs a higher plan. Upgrade to unlock extended reports.",
}
