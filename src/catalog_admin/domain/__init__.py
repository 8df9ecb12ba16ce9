"""🏭 Доменний шар: сутності та чисті сервіси без I/O."""
