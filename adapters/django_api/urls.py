"""
Shopfloor Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("choices", views.choices_view),
    path("stock", views.stock_list_view),
    path("stock/create", views.stock_create_view),
    path("stock/update", views.stock_update_view),
    path("workers", views.workers_list_view),
    path("workers/create", views.workers_create_view),
    path("workers/update", views.workers_update_view),
    path("workers/attendance", views.workers_attendance_view),
    path("workers/attendance/preview", views.workers_attendance_preview_view),
    path("materials", views.materials_list_view),
    path("materials/create", views.materials_create_view),
    path("materials/update", views.materials_update_view),
    path("expenses", views.expenses_list_view),
    path("expenses/create", views.expenses_create_view),
    path("expenses/update", views.expenses_update_view),
    path("bills", views.bills_list_view),
    path("bills/create", views.bills_create_view),
    path("bills/update", views.bills_update_view),
    path("bills/draft", views.bills_draft_view),
]
