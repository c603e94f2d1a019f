from redis import Redis

from infrastructure.redis_repository import BankLedgerRepository, CashInventoryRepository
from infrastructure.settings import get_settings

settings = get_settings()
demo = settings.demo

redis = Redis(host=settings.redis.host, port=settings.redis.port, decode_responses=True)

ledger = BankLedgerRepository(redis, settings.terminal.key_prefix)
ledger.register_card(demo.card_id, demo.pin)
ledger.open_account(demo.account_id, demo.balance)

CashInventoryRepository(redis, settings.terminal.key_prefix).set_cash_on_hand(demo.cash_on_hand)
