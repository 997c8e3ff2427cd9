from .stay_date_policy import StayDatePolicy as StayDatePolicy
