"""🧱 Інфраструктура: HTTP-доступ до сховища та сервіси поверх нього."""
