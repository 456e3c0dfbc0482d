# contact/exceptions.py
from robospark.exceptions import NotFound


class MessageNotFound(NotFound):
    default_message = "Message not found"
