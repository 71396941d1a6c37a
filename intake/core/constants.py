# Answer keys (keep aligned with questions.QUESTIONS ids / sub-field keys)
SUBMISSION_TYPE = "submissionType"
RIGHTS = "rights"
TERRITORIES = "territories"

# submissionType values
FINISHED = "finished"
WIP = "wip"
IDEA = "idea"
TRAILER = "trailer"

# rights values
YES_WORLD = "yes_world"
YES_LIMITED = "yes_limited"
NO_UNSURE = "no_unsure"

RIGHTS_HELD = (YES_WORLD, YES_LIMITED)

# Tracks
TRACK_ORIGINAL = "original"
TRACK_RFD = "rfd"

# availability values (RFD contact form)
AVAILABILITY_NONE = "none"
AVAILABILITY_FESTIVALS = "festivals"
AVAILABILITY_OTHER_PLATFORMS = "other_platforms"

# Synopsis bounds, inclusive, measured on the trimmed text
SYNOPSIS_MIN = 40
SYNOPSIS_MAX = 1000

# Inline messages shown under the offending field
MSG_NAME_REQUIRED = "Full name is required"
MSG_EMAIL_REQUIRED = "Email is required"
MSG_EMAIL_INVALID = "Please enter a valid email address"
MSG_SYNOPSIS_REQUIRED = "Synopsis is required"
MSG_SYNOPSIS_TOO_SHORT = f"Synopsis must be at least {SYNOPSIS_MIN} characters"
MSG_SYNOPSIS_TOO_LONG = f"Synopsis must be no more than {SYNOPSIS_MAX} characters"
MSG_SCREENER_REQUIRED = "Screener link is required"
MSG_SCREENER_INVALID = "Please enter a valid URL"
MSG_AVAILABILITY_REQUIRED = "Please select where it is currently available"

# Outcome copy
ORIGINAL_HEADLINE = "Looks like a Tubi Original submission"
RFD_HEADLINE = "Looks like Redistribution (RFD)"
ORIGINAL_MESSAGE = (
    "Ideas, pitches, rough cuts and trailers go through our Originals development intake. "
    "Complete the official submission to share your project with the team."
)
RFD_MESSAGE = "Please provide the following information to complete your submission:"
CTA_LABEL = "Complete Official Submission"
CTA_HELPER = "Opens in a new tab. You can return here anytime."
RIGHTS_NOTE = (
    "If the rights are controlled by someone else, "
    "ask the rightsholder to submit the redistribution request."
)
