import threading

from sqlmodel import Session, create_engine

from ebank.database import create_db_and_tables
from ebank.exceptions import InsufficientBalance
from ebank.services.bank_account import BankAccountService, _account_locks, account_locks


def test_locks_are_held_then_released():
    with account_locks("lock-c", "lock-d", "lock-c"):
        assert _account_locks["lock-c"].lock.locked()
        assert _account_locks["lock-d"].lock.locked()
        assert _account_locks["lock-c"].holders == 1
    assert "lock-c" not in _account_locks
    assert "lock-d" not in _account_locks


def test_waiting_caller_keeps_the_entry():
    entered = threading.Event()

    def waiter():
        with account_locks("lock-g"):
            entered.set()

    with account_locks("lock-g"):
        entry = _account_locks["lock-g"]
        t = threading.Thread(target=waiter)
        t.start()
        assert not entered.wait(timeout=0.2)
        assert entry.holders == 2
    t.join(timeout=5)
    assert entered.is_set()
    assert "lock-g" not in _account_locks


def test_opposite_transfers_do_not_deadlock():
    done = []

    def worker(a, b):
        for _ in range(200):
            with account_locks(a, b):
                pass
        done.append((a, b))

    threads = [
        threading.Thread(target=worker, args=("lock-e", "lock-f")),
        threading.Thread(target=worker, args=("lock-f", "lock-e")),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert len(done) == 2
    assert "lock-e" not in _account_locks
    assert "lock-f" not in _account_locks


def test_concurrent_debits_on_separate_sessions(tmp_path):
    """Only one of several racing debits can pass the balance check"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'bank.db'}",
        connect_args={"check_same_thread": False},
    )
    create_db_and_tables(engine)
    with Session(engine) as session:
        service = BankAccountService(session)
        customer = service.save_customer("Race", "race@example.com")
        account_id = service.save_current_account(100, 0, customer.id).id

    results = []
    results_guard = threading.Lock()
    start = threading.Barrier(8)

    def worker():
        with Session(engine) as session:
            service = BankAccountService(session)
            start.wait()
            try:
                service.debit(account_id, 60, "race")
                outcome = "ok"
            except InsufficientBalance:
                outcome = "refused"
        with results_guard:
            results.append(outcome)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert sorted(results) == ["ok"] + ["refused"] * 7
    with Session(engine) as session:
        service = BankAccountService(session)
        assert service.get_bank_account(account_id).balance == 40
        assert len(service.account_history(account_id)) == 1
    engine.dispose()
