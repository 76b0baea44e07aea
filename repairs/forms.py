from django import forms
from django.utils.dateparse import parse_date, parse_datetime
import datetime
import json

from .models import Customer


class CustomerForm(forms.ModelForm):
    # Addresses arrive as structured JSON and are stored as JSON text
    shop_address = forms.JSONField(required=False)
    company_address = forms.JSONField(required=False)

    class Meta:
        model = Customer
        fields = [
            'customer_name', 'company_name', 'contact_person', 'phone_number',
            'contact_email', 'contact_line_id', 'shop_name', 'shop_address', 'company_address',
        ]

    @classmethod
    def from_payload(cls, data, instance=None):
        """Bind the form to an API payload. ``contact_line_name`` is accepted as an alias of ``contact_line_id``."""
        data = dict(data)
        if 'contact_line_id' not in data and 'contact_line_name' in data:
            data['contact_line_id'] = data['contact_line_name']
        for field in ('shop_address', 'company_address'):
            # JSONField expects the raw JSON text of the form value
            value = data.get(field)
            if value is not None:
                data[field] = json.dumps(value, ensure_ascii=False)
        return cls(data, instance=instance)

    def save(self, commit=True):
        customer = super().save(commit=False)
        customer.contact_tel = customer.phone_number
        customer.shop_address = Customer.dump_address(self.cleaned_data.get('shop_address'))
        customer.company_address = Customer.dump_address(self.cleaned_data.get('company_address'))
        if commit:
            customer.save()
        return customer


class DeviceTypeForm(forms.Form):
    device_type = forms.CharField(max_length=100)
    brand = forms.CharField(max_length=100)
    model = forms.CharField(max_length=100)
    common_issues = forms.CharField(required=False, strip=True)


class DeviceForm(forms.Form):
    serial_number = forms.CharField(max_length=100, required=False)
    installation_location = forms.CharField(max_length=255, required=False)
    warranty_end_date = forms.CharField(required=False)

    def clean_serial_number(self):
        # Blank serials are stored as NULL so they do not collide on the unique index
        return self.cleaned_data.get('serial_number') or None

    def clean_installation_location(self):
        return self.cleaned_data.get('installation_location') or None

    def clean_warranty_end_date(self):
        """Accept an ISO date, an ISO datetime (offsets allowed) or dd/mm/yyyy."""
        value = (self.cleaned_data.get('warranty_end_date') or '').strip()
        if not value:
            return None
        try:
            parsed = parse_date(value)
            if parsed is not None:
                return parsed
            parsed = parse_datetime(value)
            if parsed is not None:
                return parsed.date()
            return datetime.datetime.strptime(value, '%d/%m/%Y').date()
        except ValueError:
            raise forms.ValidationError('Enter a valid date.', code='invalid')
