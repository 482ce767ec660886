"""Enumerations for AidPanel.

Values are the Turkish display labels stored by the panel.
"""

from enum import StrEnum


class CalendarEventType(StrEnum):
    EVENT = "Etkinlik"
    TASK = "Görev"
    HEARING = "Duruşma"


class LedgerKind(StrEnum):
    CASH = "Nakit"
    IN_KIND = "Ayni"


class PaymentPurpose(StrEnum):
    DONATION_INCOME = "Bağış Girişi"
    AID_PAYMENT = "Yardım Ödemesi"
    SCHOLARSHIP_PAYMENT = "Burs Ödemesi"
    ORPHAN_SUPPORT = "Yetim Desteği"
    ELDER_SUPPORT = "Vefa Desteği"
    EXPENSE_PAYMENT = "Gider Ödemesi"


class Currency(StrEnum):
    TRY = "TRY"
    USD = "USD"
    EUR = "EUR"


class FinancialDirection(StrEnum):
    INCOME = "Gelir"
    EXPENSE = "Gider"


class MessageChannel(StrEnum):
    SMS = "SMS"
    EMAIL = "E-posta"


class ApplicationStatus(StrEnum):
    PENDING = "Bekleyen"
    IN_REVIEW = "İncelenen"
    APPROVED = "Onaylanan"
    REJECTED = "Reddedilen"
    COMPLETED = "Tamamlanan"
    REJECTED_BY_PRESIDENT = "Başkan Reddetti"


class ProjectStatus(StrEnum):
    PLANNING = "Planlama"
    IN_PROGRESS = "Devam Ediyor"
    COMPLETED = "Tamamlandı"
    CANCELLED = "İptal Edildi"


class MembershipType(StrEnum):
    STANDARD = "Standart"
    VOLUNTEER = "Gönüllü"
    HONORARY = "Onursal"


class MapLayer(StrEnum):
    RECIPIENTS = "recipients"
    VOLUNTEERS = "volunteers"
    BOXES = "boxes"


class ActivityKind(StrEnum):
    DONATION = "donation"
    PERSON = "person"
    APPLICATION = "application"
