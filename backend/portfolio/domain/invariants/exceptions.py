class InvariantViolation(Exception):
    """A record failed validation before reaching the gateway."""


class DuplicateSlug(InvariantViolation):
    def __init__(self, table, slug):
        self.table = table
        self.slug = slug
        super().__init__(f"A record in {table} already uses the slug '{slug}'")
