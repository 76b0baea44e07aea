"""
Customer and device operations behind the JSON API.

register_customer() is the one multi-step write: it stores a customer, resolves
the device type of every submitted device by its (device_type, brand, model)
natural key, stores the devices and links them to the customer. Everything runs
inside a single transaction.atomic() block; if any step fails nothing is kept
and the caller gets a TransactionFailure wrapping the original error.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Prefetch
from django.utils import timezone

from .exceptions import NotFound, TransactionFailure, ValidationFailure
from .forms import CustomerForm, DeviceForm, DeviceTypeForm
from .models import Customer, CustomerDevice, Device, DeviceType

logger = logging.getLogger(__name__)


def _customer_queryset():
    links = CustomerDevice.objects.select_related('device', 'device__device_type')
    return Customer.objects.prefetch_related(Prefetch('customer_devices', queryset=links))


def _clean_customer(data, instance=None):
    form = CustomerForm.from_payload(data, instance=instance)
    if not form.is_valid():
        raise ValidationFailure('Invalid customer data', errors=form.errors.get_json_data())
    return form


def _clean_device(device_data):
    if not isinstance(device_data, dict):
        raise ValidationFailure('Each device must be an object')
    form = DeviceForm(device_data)
    if not form.is_valid():
        raise ValidationFailure('Invalid device data', errors=form.errors.get_json_data())
    return form.cleaned_data


def _clean_device_type(type_data):
    if not isinstance(type_data, dict):
        raise ValidationFailure('device_type is required for each device')
    form = DeviceTypeForm(type_data)
    if not form.is_valid():
        raise ValidationFailure('Invalid device type', errors=form.errors.get_json_data())
    return form.cleaned_data


def resolve_device_type(device_type, brand, model, common_issues=None):
    """
    Find or create the DeviceType for a natural key in one statement.

    Uses INSERT ... ON CONFLICT against the unique (device_type, brand, model)
    constraint. A non-empty common_issues overwrites the stored value, an empty
    one leaves it alone.
    """
    candidate = DeviceType(device_type=device_type, brand=brand, model=model, common_issues=common_issues or None)
    if common_issues:
        DeviceType.objects.bulk_create(
            [candidate],
            update_conflicts=True,
            unique_fields=['device_type', 'brand', 'model'],
            update_fields=['common_issues', 'updated_at'],
        )
    else:
        DeviceType.objects.bulk_create([candidate], ignore_conflicts=True)
    return DeviceType.objects.get(device_type=device_type, brand=brand, model=model)


def _save_device(device):
    try:
        with transaction.atomic():
            device.save()
    except IntegrityError as e:
        raise ValidationFailure(
            'Serial number already in use',
            errors={'serial_number': [{'message': f"Serial number {device.serial_number} is already in use", 'code': 'unique'}]},
        ) from e
    return device


def _add_device(customer, device_data, actor):
    fields = _clean_device(device_data)
    type_fields = _clean_device_type(device_data.get('device_type'))

    device = None
    if fields['serial_number']:
        # A known serial links the existing device as stored
        device = Device.objects.filter(serial_number=fields['serial_number']).first()

    if device is None:
        device_type = resolve_device_type(**type_fields)
        device = _save_device(Device(device_type=device_type, **fields))

    link, _ = CustomerDevice.objects.get_or_create(
        customer=customer,
        device=device,
        defaults={'start_date': timezone.now(), 'created_by': actor},
    )
    return link


def register_customer(data, devices=None, actor=None):
    """
    Create a customer together with its devices.

    ``data`` holds the customer fields, ``devices`` a list of
    ``{serial_number?, installation_location?, warranty_end_date?,
    device_type: {device_type, brand, model, common_issues?}}`` dicts, and
    ``actor`` the user recorded as creator. Returns the new Customer.
    """
    form = _clean_customer(data)
    if devices is None:
        devices = []
    if not isinstance(devices, list):
        raise ValidationFailure('devices must be a list')

    logger.info(f"Registering customer '{form.cleaned_data['customer_name']}' with {len(devices)} device(s)")
    try:
        with transaction.atomic():
            customer = form.save(commit=False)
            customer.created_by = actor
            customer.save()

            for device_data in devices:
                _add_device(customer, device_data, actor)
    except Exception as e:
        logger.warning(f"Customer registration rolled back: {e}")
        raise TransactionFailure(cause=e) from e

    logger.info(f"Registered customer {customer.customer_id}")
    return customer


def get_customer(customer_id):
    try:
        return _customer_queryset().get(customer_id=customer_id)
    except (Customer.DoesNotExist, ValidationError):
        raise NotFound(f"Customer {customer_id} not found")


def list_customers():
    return _customer_queryset().order_by('-updated_at')


def _linked_device(customer, device_id):
    try:
        link = CustomerDevice.objects.select_related('device').get(customer=customer, device_id=device_id)
    except (CustomerDevice.DoesNotExist, ValidationError):
        raise NotFound(f"Device {device_id} is not linked to customer {customer.customer_id}")
    return link.device


def update_customer(customer_id, data, devices=None, actor=None):
    """
    Replace a customer's fields and update the devices linked to it.

    Only device entries carrying a ``device_id`` are touched; new devices are
    added through register_customer().
    """
    customer = get_customer(customer_id)
    form = _clean_customer(data, instance=customer)
    if devices is None:
        devices = []
    if not isinstance(devices, list):
        raise ValidationFailure('devices must be a list')

    try:
        with transaction.atomic():
            customer = form.save()
            for device_data in devices:
                if not isinstance(device_data, dict) or not device_data.get('device_id'):
                    continue
                device = _linked_device(customer, device_data['device_id'])
                fields = _clean_device(device_data)
                device.serial_number = fields['serial_number']
                device.installation_location = fields['installation_location']
                device.warranty_end_date = fields['warranty_end_date']
                _save_device(device)
    except Exception as e:
        logger.warning(f"Customer update rolled back for {customer_id}: {e}")
        raise TransactionFailure(cause=e) from e

    logger.info(f"Updated customer {customer_id} by {actor}")
    return get_customer(customer_id)


def delete_customer(customer_id):
    customer = get_customer(customer_id)
    with transaction.atomic():
        # Link rows cascade, devices and device types are kept
        customer.delete()
    logger.info(f"Deleted customer {customer_id}")


def list_devices():
    return Device.objects.select_related('device_type').order_by('-updated_at')


def list_device_types():
    return DeviceType.objects.all().order_by('device_type', 'brand', 'model')


def find_device_by_serial(serial_number):
    device = Device.objects.select_related('device_type').filter(serial_number=serial_number).first()
    if device is None:
        raise NotFound(f"Device with serial number {serial_number} not found")
    return device


def get_device(device_id):
    try:
        return Device.objects.select_related('device_type').get(device_id=device_id)
    except (Device.DoesNotExist, ValidationError):
        raise NotFound(f"Device {device_id} not found")
