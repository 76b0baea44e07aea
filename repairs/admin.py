from django.contrib import admin
from .models import Customer, DeviceType, Device, CustomerDevice


class CustomerDeviceInline(admin.TabularInline):
    model = CustomerDevice
    extra = 0
    raw_id_fields = ['device']
    readonly_fields = ['created_by', 'created_at']


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ['customer_name', 'company_name', 'contact_person', 'phone_number', 'updated_at']
    search_fields = ['customer_name', 'company_name', 'contact_person', 'phone_number', 'contact_email']
    readonly_fields = ['customer_id', 'created_by', 'created_at', 'updated_at']
    list_filter = ['created_at']
    inlines = [CustomerDeviceInline]


@admin.register(DeviceType)
class DeviceTypeAdmin(admin.ModelAdmin):
    list_display = ['device_type', 'brand', 'model', 'created_at']
    search_fields = ['device_type', 'brand', 'model', 'common_issues']
    list_filter = ['device_type', 'brand']
    readonly_fields = ['created_at', 'updated_at']


@admin.register(Device)
class DeviceAdmin(admin.ModelAdmin):
    list_display = ['device_id', 'serial_number', 'device_type', 'installation_location', 'warranty_end_date']
    search_fields = ['serial_number', 'installation_location', 'device_type__brand', 'device_type__model']
    list_filter = ['device_type__device_type', 'device_type__brand']
    raw_id_fields = ['device_type']
    readonly_fields = ['device_id', 'created_at', 'updated_at']


@admin.register(CustomerDevice)
class CustomerDeviceAdmin(admin.ModelAdmin):
    list_display = ['customer', 'device', 'start_date', 'created_by']
    search_fields = ['customer__customer_name', 'device__serial_number']
    list_filter = ['start_date']
    raw_id_fields = ['customer', 'device']
    readonly_fields = ['created_by', 'created_at']
