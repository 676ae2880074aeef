from mindstore.domain.person.aggregates.person import Admin, Person, User

__all__ = ["Admin", "Person", "User"]
