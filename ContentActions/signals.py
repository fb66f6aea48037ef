from django.dispatch import Signal

# Sent after an approval transaction commits.
# Arguments: action_id, team_id, user_id
content_approved = Signal()
