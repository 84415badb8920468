"""
Application-wide constants
"""

# Appointment statuses
APPOINTMENT_STATUS_SCHEDULED = 'scheduled'
APPOINTMENT_STATUS_COMPLETED = 'completed'
APPOINTMENT_STATUS_CANCELLED = 'cancelled'

APPOINTMENT_STATUSES = [
    (APPOINTMENT_STATUS_SCHEDULED, 'Scheduled'),
    (APPOINTMENT_STATUS_COMPLETED, 'Completed'),
    (APPOINTMENT_STATUS_CANCELLED, 'Cancelled'),
]

# Appointment sources
APPOINTMENT_SOURCE_INTERNAL = 'internal'
APPOINTMENT_SOURCE_PUBLIC = 'public'

APPOINTMENT_SOURCES = [
    (APPOINTMENT_SOURCE_INTERNAL, 'Internal'),
    (APPOINTMENT_SOURCE_PUBLIC, 'Public booking'),
]

# Fallbacks applied when a booking references an unknown service
DEFAULT_SERVICE_DURATION_MINUTES = 60
DEFAULT_SERVICE_PRICE = 0

# Hourly slot catalog shown to clients (coarse availability)
SLOT_CATALOG = [f'{hour:02d}:00' for hour in range(9, 20)]

# License statuses
LICENSE_STATUS_ACTIVE = 'active'
LICENSE_STATUS_EXPIRED = 'expired'
LICENSE_STATUS_SUSPENDED = 'suspended'

LICENSE_STATUSES = [
    (LICENSE_STATUS_ACTIVE, 'Active'),
    (LICENSE_STATUS_EXPIRED, 'Expired'),
    (LICENSE_STATUS_SUSPENDED, 'Suspended'),
]

# License plans
PLAN_TRIAL = 'trial'
PLAN_STANDARD_MONTH = 'standard_month'
PLAN_STANDARD_YEAR = 'standard_year'
PLAN_GOLD_MONTH = 'gold_month'
PLAN_GOLD_YEAR = 'gold_year'
PLAN_PREMIUM_MONTH = 'premium_month'
PLAN_PREMIUM_YEAR = 'premium_year'

LICENSE_PLANS = [
    (PLAN_TRIAL, 'Trial'),
    (PLAN_STANDARD_MONTH, 'Standard (monthly)'),
    (PLAN_STANDARD_YEAR, 'Standard (annual)'),
    (PLAN_GOLD_MONTH, 'Gold (monthly)'),
    (PLAN_GOLD_YEAR, 'Gold (annual)'),
    (PLAN_PREMIUM_MONTH, 'Premium (monthly)'),
    (PLAN_PREMIUM_YEAR, 'Premium (annual)'),
]

UNLIMITED_BOOKINGS = 999999
TRIAL_PERIOD_DAYS = 14

# Report depth levels
REPORT_LEVEL_BASIC = 1
REPORT_LEVEL_EXTENDED = 2
REPORT_LEVEL_FULL = 3

# Transaction types
TRANSACTION_TYPE_INCOME = 'income'
TRANSACTION_TYPE_EXPENSE = 'expense'
TRANSACTION_TYPE_LICENSE_PAYMENT = 'license_payment'

TRANSACTION_TYPES = [
    (TRANSACTION_TYPE_INCOME, 'Income'),
    (TRANSACTION_TYPE_EXPENSE, 'Expense'),
    (TRANSACTION_TYPE_LICENSE_PAYMENT, 'License payment'),
]

# Payment methods
PAYMENT_METHODS = [
    ('cash', 'Cash'),
    ('card', 'Card'),
    ('transfer', 'Transfer'),
    ('mobile', 'Mobile money'),
    ('other', 'Other'),
]

# Ticket statuses and priorities
TICKET_STATUS_OPEN = 'open'
TICKET_STATUS_PENDING = 'pending'
TICKET_STATUS_RESOLVED = 'resolved'
TICKET_STATUS_CLOSED = 'closed'

TICKET_STATUSES = [
    (TICKET_STATUS_OPEN, 'Open'),
    (TICKET_STATUS_PENDING, 'Pending'),
    (TICKET_STATUS_RESOLVED, 'Resolved'),
    (TICKET_STATUS_CLOSED, 'Closed'),
]

TICKET_PRIORITIES = [
    ('low', 'Low'),
    ('medium', 'Medium'),
    ('high', 'High'),
    ('urgent', 'Urgent'),
]
