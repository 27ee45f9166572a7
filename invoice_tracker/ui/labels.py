"""
Display text for the invoice page.

The page is rendered in one of two modes:
- en: full form/table with edit, delete and print controls
- ar: Arabic, right-to-left, with a read-only status column in place of
  the edit/delete actions

Both modes share the same layout builders and view-state code; only the
labels and the feature flags below differ.
"""

from typing import Dict, Optional

DEFAULT_LOCALE = "en"

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "dir": "ltr",
        "title": "Invoice Generator",
        "print": "Print Page",
        "customer_name": "Customer Name",
        "customer_name_placeholder": "e.g. John Doe",
        "amount": "Amount",
        "amount_placeholder": "e.g. 1500",
        "due_date": "Due Date",
        "created_at": "Created At",
        "actions": "Actions",
        "status": "Status",
        "status_pending": "Pending",
        "edit": "Edit",
        "delete": "Delete",
        "create_invoice": "Create Invoice",
        "update_invoice": "Update Invoice",
        "invoices": "Invoices",
        "total": "Total",
        "loading_invoices": "Loading invoices...",
        "no_invoices": "No invoices yet.",
        "fill_all_fields": "Please fill in all fields.",
        "fetch_error": "Error fetching invoices.",
        "save_error": "Error while saving the invoice.",
        "delete_error": "Error while deleting the invoice.",
        "print_error": "Error while printing the invoices.",
        "created": "Invoice created successfully.",
        "updated": "Invoice updated successfully.",
        "deleted": "Invoice deleted successfully.",
        "confirm_delete": "Are you sure you want to delete this invoice?",
    },
    "ar": {
        "dir": "rtl",
        "title": "مولد الفواتير",
        "print": "طباعة الصفحة",
        "customer_name": "اسم العميل",
        "customer_name_placeholder": "مثال: محمد أحمد",
        "amount": "المبلغ",
        "amount_placeholder": "مثال: 1500",
        "due_date": "تاريخ الاستحقاق",
        "created_at": "تاريخ الإنشاء",
        "actions": "الإجراءات",
        "status": "الحالة",
        "status_pending": "قيد الانتظار",
        "edit": "تعديل",
        "delete": "حذف",
        "create_invoice": "إنشاء فاتورة",
        "update_invoice": "تحديث الفاتورة",
        "invoices": "الفواتير",
        "total": "الإجمالي",
        "loading_invoices": "جاري تحميل الفواتير...",
        "no_invoices": "لا توجد فواتير بعد.",
        "fill_all_fields": "يرجى تعبئة جميع الحقول.",
        "fetch_error": "حدث خطأ أثناء جلب الفواتير.",
        "save_error": "حدث خطأ أثناء حفظ الفاتورة.",
        "delete_error": "حدث خطأ أثناء حذف الفاتورة.",
        "print_error": "حدث خطأ أثناء طباعة الفواتير.",
        "created": "تم إنشاء الفاتورة بنجاح.",
        "updated": "تم تحديث الفاتورة بنجاح.",
        "deleted": "تم حذف الفاتورة بنجاح.",
        "confirm_delete": "هل أنت متأكد أنك تريد حذف هذه الفاتورة؟",
    },
}

# Locales that only display invoices: a status column replaces edit/delete
# and there is no print control.
READ_ONLY_LOCALES = frozenset({"ar"})


def resolve_locale(locale: Optional[str]) -> str:
    normalized = (locale or "").strip().lower()
    return normalized if normalized in LABELS else DEFAULT_LOCALE


def get_labels(locale: Optional[str]) -> Dict[str, str]:
    return LABELS[resolve_locale(locale)]


def is_read_only(locale: Optional[str]) -> bool:
    return resolve_locale(locale) in READ_ONLY_LOCALES


def locale_from_path(pathname: Optional[str]) -> str:
    """Map a page path to its locale: ``/ar`` is the Arabic page, anything else English."""
    segments = [segment for segment in (pathname or "").split("/") if segment]
    return resolve_locale(segments[-1]) if segments else DEFAULT_LOCALE
