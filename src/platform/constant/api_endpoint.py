# Backend API Endpoint Constants (paths relative to API_BASE_URL)

# Base API
API_BASE = '/api'

# Event endpoints
EVENT_BASE = f'{API_BASE}/events'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPCOMING_ONGOING = f'{EVENT_BASE}/upcoming-ongoing'
EVENT_REGISTER = f'{EVENT_BASE}/{{event_id}}/register'
EVENT_BOOKINGS = f'{EVENT_BASE}/{{event_id}}/bookings'

# Booking endpoints
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_LIST = BOOKING_BASE
BOOKING_BY_SNO = f'{BOOKING_BASE}/sno/{{sno}}'
BOOKING_SCAN = f'{BOOKING_BASE}/sno/{{sno}}/scan'
BOOKING_BY_HOST = f'{BOOKING_BASE}/host/{{host_id}}'

# Frontend routes
FRONTEND_ACTIVATE = '/activate/{sno}'
