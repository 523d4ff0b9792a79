import pytest

from designdemos.payments import CreditCardPayment, JazzCashPayment, PaymentStrategy


def test_credit_card_prints_receipt(capsys):
    message = CreditCardPayment("TEST-CARD").pay(3500.0)
    assert message == "Paid 3500 PKR using Credit Card TEST-CARD"
    assert capsys.readouterr().out == message + "\n"


def test_jazzcash_prints_receipt(capsys):
    message = JazzCashPayment("demo-wallet").pay(3500.0)
    assert message == "Paid 3500 PKR using JazzCash with mobile demo-wallet"
    assert capsys.readouterr().out.strip() == message


def test_fractional_amount_is_kept():
    message = CreditCardPayment("TEST-CARD").pay(12.5)
    assert "12.5 PKR" in message


def test_payment_strategy_is_abstract():
    with pytest.raises(TypeError):
        PaymentStrategy()


def test_each_payment_reports_its_own_amount(capsys):
    wallet = JazzCashPayment("demo-wallet")
    first = wallet.pay(3500.0)
    second = wallet.pay(45000.0)
    assert first == "Paid 3500 PKR using JazzCash with mobile demo-wallet"
    assert second == "Paid 45000 PKR using JazzCash with mobile demo-wallet"
    assert capsys.readouterr().out.splitlines() == [first, second]