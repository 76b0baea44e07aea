from django.urls import path
from . import views

app_name = 'repairs'

urlpatterns = [
    path('auth/login', views.login, name='login'),

    # Customer
    path('customers', views.customer_collection, name='customer_collection'),
    path('customers/<str:customer_id>', views.customer_detail, name='customer_detail'),

    # Device
    path('devices', views.device_list, name='device_list'),
    path('devices/types', views.device_type_list, name='device_type_list'),
    path('devices/serial/<str:serial_number>', views.device_by_serial, name='device_by_serial'),
    path('devices/<str:device_id>', views.device_detail, name='device_detail'),
]
