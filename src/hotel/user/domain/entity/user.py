from hotel.shared.domain import AggregateRoot, UserId


class User(AggregateRoot[UserId]):
    """ユーザー

    登録・認証は認証サービス側の責務で、このサービスは予約フラグのみ更新する。
    """

    def __init__(
        self,
        id: UserId,
        name: str,
        email: str,
        role: str = "user",
        is_booking: bool = False,
        password_hash: str | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._role = role
        self._is_booking = is_booking
        self._password_hash = password_hash

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def role(self) -> str:
        return self._role

    @property
    def is_booking(self) -> bool:
        return self._is_booking

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    def mark_as_booking(self) -> None:
        """一度でも予約したユーザーとして記録する

        キャンセルしても False には戻さない。
        """
        self._is_booking = True
