from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    """Canonical payment methods, valued by the raw code the POS stores."""
    CASH = "cash"
    CREDIT_CARD = "creditCard"
    DEBIT_CARD = "debitCard"
    CARD = "card"
    MOMO = "momo"
    ZALOPAY = "zalopay"
    VNPAY = "vnpay"
    QR_CODE = "qrCode"
    SHOPEEPAY = "shopeepay"
    GRABPAY = "grabpay"


PAYMENT_METHOD_LABELS: dict[PaymentMethod, str] = {
    PaymentMethod.CASH: "Cash",
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.DEBIT_CARD: "Debit Card",
    PaymentMethod.CARD: "Bank Transfer",
    PaymentMethod.MOMO: "MoMo",
    PaymentMethod.ZALOPAY: "ZaloPay",
    PaymentMethod.VNPAY: "VNPay",
    PaymentMethod.QR_CODE: "QR Code",
    PaymentMethod.SHOPEEPAY: "ShopeePay",
    PaymentMethod.GRABPAY: "GrabPay",
}
