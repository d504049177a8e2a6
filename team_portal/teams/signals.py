from django.dispatch import Signal

# Sent after a student creates or joins a team.
# Arguments: student (Student), team (Team), created (bool)
membership_changed = Signal()
