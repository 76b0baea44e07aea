from django.db import models
from django.conf import settings
import json
import uuid


class Customer(models.Model):
    customer_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer_name = models.CharField(max_length=255)
    company_name = models.CharField(max_length=255, blank=True, null=True)
    contact_person = models.CharField(max_length=255, blank=True)
    phone_number = models.CharField(max_length=50)
    contact_tel = models.CharField(max_length=50, blank=True, default='')
    contact_email = models.EmailField(blank=True, null=True)
    contact_line_id = models.CharField(max_length=100, blank=True, null=True)
    shop_name = models.CharField(max_length=255, blank=True, null=True)
    # Structured addresses are stored as JSON text
    shop_address = models.TextField(blank=True, null=True)
    company_address = models.TextField(blank=True, null=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='created_customers')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return self.customer_name

    @staticmethod
    def dump_address(value):
        """Serialize an address payload (dict, list or string) to JSON text."""
        if value in (None, '', {}, []):
            return None
        return json.dumps(value, ensure_ascii=False)

    @staticmethod
    def load_address(value):
        if not value:
            return None
        try:
            return json.loads(value)
        except ValueError:
            # Rows written before addresses were structured hold plain text
            return value

    def get_shop_address(self):
        return self.load_address(self.shop_address)

    def get_company_address(self):
        return self.load_address(self.company_address)


class DeviceType(models.Model):
    device_type = models.CharField(max_length=100)
    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    common_issues = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['device_type', 'brand', 'model']
        constraints = [
            models.UniqueConstraint(fields=['device_type', 'brand', 'model'], name='unique_device_type_brand_model'),
        ]

    def __str__(self):
        return f"{self.device_type} {self.brand} {self.model}"


class Device(models.Model):
    device_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    serial_number = models.CharField(max_length=100, unique=True, blank=True, null=True)
    installation_location = models.CharField(max_length=255, blank=True, null=True)
    warranty_end_date = models.DateField(blank=True, null=True)
    device_type = models.ForeignKey(DeviceType, on_delete=models.PROTECT, related_name='devices')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.device_type} ({self.serial_number or 'No Serial'})"


class CustomerDevice(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name='customer_devices')
    device = models.ForeignKey(Device, on_delete=models.CASCADE, related_name='customer_devices')
    start_date = models.DateTimeField()
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='created_customer_devices')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['start_date', 'id']
        constraints = [
            models.UniqueConstraint(fields=['customer', 'device'], name='unique_customer_device'),
        ]

    def __str__(self):
        return f"{self.customer} -> {self.device}"
