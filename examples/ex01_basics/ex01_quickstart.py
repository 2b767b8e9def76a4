"""Quickstart: wire beans by name from constructor annotations.

Declare which class backs each bean name, ask for the top-level bean, and let
the container build the dependency chain. A parameter typed ``Database`` is
satisfied by the bean named ``"database"``.
"""

from __future__ import annotations

from beanwire import Container, StaticBeanCatalog


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


class UserService:
    def __init__(self, user_repository: UserRepository) -> None:
        self.repository = user_repository


def main() -> None:
    catalog = StaticBeanCatalog.from_mapping(
        {
            "database": Database,
            "userRepository": UserRepository,
            "userService": UserService,
        },
    )
    container = Container(catalog)

    print(f"beans={container.list_bean_definitions()}")
    service = container.get_bean("userService", UserService)

    print(f"db_host={service.repository.database.host}")  # => db_host=localhost
    print(f"created={container.bean_names()}")  # => created=['database', 'userRepository', 'userService']
    print(f"same_instance={container.get_bean('userService') is service}")  # => same_instance=True


if __name__ == "__main__":
    main()
