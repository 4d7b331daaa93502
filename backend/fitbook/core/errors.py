class NotAuthenticated(Exception):
    """Raised by the session gate when a protected route is hit anonymously."""

    def __init__(self, path: str = ""):
        super().__init__(path)
        self.path = path


class UserExistsError(Exception):
    """A user with this name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"User '{name}' already exists")
        self.name = name
