import itertools
from abc import ABC, abstractmethod

from src.common.exceptions import ResourceAlreadyExistsException, ResourceType
from src.users.schemas import CreateUserRequest, User


class UserStore(ABC):
    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    def create_user(self, user_input: CreateUserRequest) -> User:
        pass


class InMemoryUserStore(UserStore):
    def __init__(self):
        self.users: dict[int, User] = {}
        self._ids = itertools.count(1)

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self.users.values() if user.username == username), None
        )

    def create_user(self, user_input: CreateUserRequest) -> User:
        if self.get_user_by_username(user_input.username) is not None:
            raise ResourceAlreadyExistsException(ResourceType.USER, user_input.username)

        user = User(id=next(self._ids), **user_input.model_dump())
        self.users[user.id] = user
        return user
