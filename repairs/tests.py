import datetime
import json

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from django.test import TestCase, Client
from django.urls import reverse
from django.utils import timezone

from . import services
from .auth import create_access_token
from .exceptions import NotFound, TransactionFailure, ValidationFailure
from .models import Customer, CustomerDevice, Device, DeviceType


def printer(serial=None, common_issues=None, **extra):
    device_type = {'device_type': 'Printer', 'brand': 'Epson', 'model': 'L3210'}
    if common_issues is not None:
        device_type['common_issues'] = common_issues
    descriptor = {'device_type': device_type}
    if serial is not None:
        descriptor['serial_number'] = serial
    descriptor.update(extra)
    return descriptor


class RegisterCustomerTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='tech', password='s3cret-pass')

    def test_register_customer_with_one_device(self):
        """Acme with one printer creates one row in each table"""
        customer = services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '0812345678', 'contact_person': 'John'},
            devices=[printer('SN1')],
            actor=self.user,
        )

        self.assertEqual(Customer.objects.count(), 1)
        self.assertEqual(DeviceType.objects.count(), 1)
        self.assertEqual(Device.objects.count(), 1)
        self.assertEqual(CustomerDevice.objects.count(), 1)

        device_type = DeviceType.objects.get()
        self.assertEqual((device_type.device_type, device_type.brand, device_type.model), ('Printer', 'Epson', 'L3210'))

        device = Device.objects.get()
        self.assertEqual(device.serial_number, 'SN1')
        self.assertEqual(device.device_type_id, device_type.id)

        link = CustomerDevice.objects.get()
        self.assertEqual(link.customer_id, customer.customer_id)
        self.assertEqual(link.device_id, device.device_id)
        self.assertEqual(link.created_by, self.user)
        self.assertLess(abs(timezone.now() - link.start_date), datetime.timedelta(minutes=1))

        self.assertEqual(customer.created_by, self.user)
        self.assertEqual(customer.contact_tel, '0812345678')

    def test_register_customer_without_devices(self):
        customer = services.register_customer({'customer_name': 'Solo', 'phone_number': '0800000000'})
        self.assertEqual(Customer.objects.count(), 1)
        self.assertFalse(customer.customer_devices.exists())
        self.assertIsNone(customer.created_by)

    def test_device_type_shared_between_customers(self):
        """Beta reuses the Printer/Epson/L3210 type created for Acme"""
        services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1')], actor=self.user)
        services.register_customer({'customer_name': 'Beta', 'phone_number': '2'}, devices=[printer('SN2')], actor=self.user)

        self.assertEqual(DeviceType.objects.filter(device_type='Printer', brand='Epson', model='L3210').count(), 1)
        self.assertEqual(Device.objects.count(), 2)
        type_ids = set(Device.objects.values_list('device_type_id', flat=True))
        self.assertEqual(type_ids, {DeviceType.objects.get().id})

    def test_common_issues_last_write_wins(self):
        services.register_customer({'customer_name': 'A', 'phone_number': '1'}, devices=[printer('SN1', common_issues='Paper jam')])
        self.assertEqual(DeviceType.objects.get().common_issues, 'Paper jam')

        services.register_customer({'customer_name': 'B', 'phone_number': '2'}, devices=[printer('SN2', common_issues='Ink leak')])
        self.assertEqual(DeviceType.objects.get().common_issues, 'Ink leak')

    def test_empty_common_issues_keeps_existing_value(self):
        services.register_customer({'customer_name': 'A', 'phone_number': '1'}, devices=[printer('SN1', common_issues='Paper jam')])
        services.register_customer({'customer_name': 'B', 'phone_number': '2'}, devices=[printer('SN2', common_issues='')])
        services.register_customer({'customer_name': 'C', 'phone_number': '3'}, devices=[printer('SN3')])

        self.assertEqual(DeviceType.objects.count(), 1)
        self.assertEqual(DeviceType.objects.get().common_issues, 'Paper jam')

    def test_invalid_warranty_date_rolls_back_everything(self):
        devices = [
            printer('SN1', warranty_end_date='2026-12-31'),
            {
                'serial_number': 'SN2',
                'warranty_end_date': 'not-a-date',
                'device_type': {'device_type': 'Laptop', 'brand': 'Dell', 'model': 'XPS 13'},
            },
        ]
        with self.assertRaises(TransactionFailure) as ctx:
            services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=devices, actor=self.user)

        self.assertIsInstance(ctx.exception.cause, ValidationFailure)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn('warranty_end_date', ctx.exception.errors)
        self.assertEqual(Customer.objects.count(), 0)
        self.assertEqual(DeviceType.objects.count(), 0)
        self.assertEqual(Device.objects.count(), 0)
        self.assertEqual(CustomerDevice.objects.count(), 0)

    def test_missing_device_type_rolls_back(self):
        with self.assertRaises(TransactionFailure):
            services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[{'serial_number': 'SN1'}])
        self.assertEqual(Customer.objects.count(), 0)

    def test_incomplete_natural_key_rolls_back(self):
        devices = [{'device_type': {'device_type': 'Printer', 'brand': 'Epson'}}]
        with self.assertRaises(TransactionFailure) as ctx:
            services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=devices)
        self.assertIn('model', ctx.exception.errors)
        self.assertEqual(Customer.objects.count(), 0)

    def test_missing_customer_name_is_validation_failure(self):
        with self.assertRaises(ValidationFailure) as ctx:
            services.register_customer({'phone_number': '1'}, devices=[printer('SN1')])
        self.assertIn('customer_name', ctx.exception.errors)
        self.assertEqual(Customer.objects.count(), 0)
        self.assertEqual(Device.objects.count(), 0)

    def test_warranty_date_is_parsed(self):
        services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '1'},
            devices=[printer('SN1', warranty_end_date='2027-01-15T00:00:00.000Z', installation_location='Front desk')],
        )
        device = Device.objects.get()
        self.assertEqual(device.warranty_end_date, datetime.date(2027, 1, 15))
        self.assertEqual(device.installation_location, 'Front desk')

    def test_warranty_datetime_with_offset_is_parsed(self):
        services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '1'},
            devices=[printer('SN1', warranty_end_date='2027-01-15T00:00:00+07:00')],
        )
        self.assertEqual(Device.objects.get().warranty_end_date, datetime.date(2027, 1, 15))

    def test_existing_serial_reuses_device_as_stored(self):
        """A known serial links the stored device and ignores the descriptor's other fields"""
        services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '1'},
            devices=[printer('SN1', installation_location='Office', warranty_end_date='2026-06-30')],
        )
        services.register_customer(
            {'customer_name': 'Beta', 'phone_number': '2'},
            devices=[{
                'serial_number': 'SN1',
                'installation_location': 'Warehouse',
                'warranty_end_date': '2030-01-01',
                'device_type': {'device_type': 'Laptop', 'brand': 'Dell', 'model': 'XPS 13'},
            }],
        )

        self.assertEqual(DeviceType.objects.count(), 1)
        device = Device.objects.get()
        self.assertEqual(device.device_type.model, 'L3210')
        self.assertEqual(device.installation_location, 'Office')
        self.assertEqual(device.warranty_end_date, datetime.date(2026, 6, 30))
        self.assertEqual(CustomerDevice.objects.filter(device=device).count(), 2)

    def test_devices_must_be_a_list(self):
        for devices in ({}, '', 0, {'serial_number': 'SN1'}):
            with self.assertRaises(ValidationFailure):
                services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=devices)
        self.assertEqual(Customer.objects.count(), 0)

    def test_existing_serial_number_is_linked_not_duplicated(self):
        first = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1')])
        second = services.register_customer({'customer_name': 'Beta', 'phone_number': '2'}, devices=[printer('SN1')])

        self.assertEqual(Device.objects.count(), 1)
        device = Device.objects.get()
        self.assertTrue(CustomerDevice.objects.filter(customer=first, device=device).exists())
        self.assertTrue(CustomerDevice.objects.filter(customer=second, device=device).exists())

    def test_duplicate_serial_in_one_payload_links_once(self):
        services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1'), printer('SN1')])
        self.assertEqual(Device.objects.count(), 1)
        self.assertEqual(CustomerDevice.objects.count(), 1)

    def test_devices_without_serial_are_separate_rows(self):
        services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer(), printer(serial='')])
        self.assertEqual(Device.objects.count(), 2)
        self.assertEqual(Device.objects.filter(serial_number__isnull=True).count(), 2)

    def test_addresses_are_stored_as_json_text(self):
        address = {'street': '99 Rama 9', 'district': 'Huai Khwang', 'zip': '10310'}
        customer = services.register_customer({
            'customer_name': 'Acme',
            'phone_number': '1',
            'shop_address': address,
            'contact_line_name': 'acme_line',
        })
        customer.refresh_from_db()
        self.assertIsInstance(customer.shop_address, str)
        self.assertEqual(json.loads(customer.shop_address), address)
        self.assertEqual(customer.get_shop_address(), address)
        self.assertIsNone(customer.company_address)
        self.assertEqual(customer.contact_line_id, 'acme_line')

    def test_detail_read_matches_submitted_devices(self):
        devices = [
            printer('SN1', installation_location='Office', warranty_end_date='2026-06-30'),
            {'serial_number': 'LT-7', 'device_type': {'device_type': 'Laptop', 'brand': 'Dell', 'model': 'XPS 13'}},
        ]
        created = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=devices)

        customer = services.get_customer(created.customer_id)
        links = list(customer.customer_devices.all())
        self.assertEqual(len(links), 2)
        by_serial = {link.device.serial_number: link.device for link in links}
        self.assertEqual(by_serial['SN1'].installation_location, 'Office')
        self.assertEqual(by_serial['SN1'].warranty_end_date, datetime.date(2026, 6, 30))
        self.assertEqual(by_serial['LT-7'].device_type.brand, 'Dell')


class TransactionFailureTest(TestCase):
    def test_database_errors_are_not_shown_to_clients(self):
        error = TransactionFailure(cause=IntegrityError('UNIQUE constraint failed: repairs_device.serial_number'))
        self.assertEqual(error.status_code, 500)
        self.assertNotIn('UNIQUE', error.message)

    def test_app_errors_keep_their_message_and_status(self):
        error = TransactionFailure(cause=NotFound('Device x not found'))
        self.assertEqual(error.status_code, 404)
        self.assertIn('Device x not found', error.message)


class DeviceTypeConstraintTest(TestCase):
    def test_natural_key_is_unique(self):
        DeviceType.objects.create(device_type='Printer', brand='Epson', model='L3210')
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                DeviceType.objects.create(device_type='Printer', brand='Epson', model='L3210')

    def test_resolve_device_type_returns_same_row(self):
        first = services.resolve_device_type('Printer', 'Canon', 'G2010')
        second = services.resolve_device_type('Printer', 'Canon', 'G2010', common_issues='Head clog')
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(second.common_issues, 'Head clog')
        self.assertEqual(DeviceType.objects.count(), 1)


class CustomerMaintenanceTest(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='tech', password='s3cret-pass')
        self.customer = services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '0811111111', 'company_name': 'Acme Co.'},
            devices=[printer('SN1')],
            actor=self.user,
        )
        self.device = Device.objects.get()

    def test_update_replaces_fields(self):
        updated = services.update_customer(
            self.customer.customer_id,
            {'customer_name': 'Acme Ltd', 'phone_number': '0822222222'},
            actor=self.user,
        )
        self.assertEqual(updated.customer_name, 'Acme Ltd')
        self.assertEqual(updated.contact_tel, '0822222222')
        # Full-field replace clears fields left out of the payload
        self.assertIsNone(updated.company_name)

    def test_update_linked_device(self):
        services.update_customer(
            self.customer.customer_id,
            {'customer_name': 'Acme', 'phone_number': '1'},
            devices=[{'device_id': str(self.device.device_id), 'serial_number': 'SN1', 'installation_location': 'Warehouse', 'warranty_end_date': '2028-01-01'}],
        )
        self.device.refresh_from_db()
        self.assertEqual(self.device.installation_location, 'Warehouse')
        self.assertEqual(self.device.warranty_end_date, datetime.date(2028, 1, 1))

    def test_update_with_unlinked_device_rolls_back(self):
        with self.assertRaises(TransactionFailure) as ctx:
            services.update_customer(
                self.customer.customer_id,
                {'customer_name': 'Renamed', 'phone_number': '1'},
                devices=[{'device_id': 'not-a-uuid'}],
            )
        self.assertIsInstance(ctx.exception.cause, NotFound)
        self.assertEqual(ctx.exception.status_code, 404)
        self.customer.refresh_from_db()
        self.assertEqual(self.customer.customer_name, 'Acme')

    def test_update_unknown_customer(self):
        with self.assertRaises(NotFound):
            services.update_customer('00000000-0000-0000-0000-000000000000', {'customer_name': 'X', 'phone_number': '1'})

    def test_update_to_taken_serial_rolls_back(self):
        services.register_customer({'customer_name': 'Beta', 'phone_number': '2'}, devices=[printer('SN2')])
        with self.assertRaises(TransactionFailure) as ctx:
            services.update_customer(
                self.customer.customer_id,
                {'customer_name': 'Renamed', 'phone_number': '1'},
                devices=[{'device_id': str(self.device.device_id), 'serial_number': 'SN2'}],
            )
        self.assertIsInstance(ctx.exception.cause, ValidationFailure)
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertIn('serial_number', ctx.exception.errors)
        self.device.refresh_from_db()
        self.assertEqual(self.device.serial_number, 'SN1')
        self.customer.refresh_from_db()
        self.assertEqual(self.customer.customer_name, 'Acme')

    def test_update_devices_must_be_a_list(self):
        with self.assertRaises(ValidationFailure):
            services.update_customer(self.customer.customer_id, {'customer_name': 'Acme', 'phone_number': '1'}, devices={})

    def test_delete_keeps_devices(self):
        services.delete_customer(self.customer.customer_id)
        self.assertEqual(Customer.objects.count(), 0)
        self.assertEqual(CustomerDevice.objects.count(), 0)
        self.assertEqual(Device.objects.count(), 1)
        self.assertEqual(DeviceType.objects.count(), 1)

    def test_delete_unknown_customer(self):
        with self.assertRaises(NotFound):
            services.delete_customer('missing')

    def test_find_device_by_serial(self):
        self.assertEqual(services.find_device_by_serial('SN1').pk, self.device.pk)
        with self.assertRaises(NotFound):
            services.find_device_by_serial('NOPE')


class CustomerApiTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username='tech', password='s3cret-pass')
        self.auth = {'HTTP_AUTHORIZATION': f'Bearer {create_access_token(self.user)}'}

    def post_json(self, url, payload, **extra):
        return self.client.post(url, data=json.dumps(payload), content_type='application/json', **extra)

    def test_login_returns_token(self):
        response = self.post_json(reverse('repairs:login'), {'username': 'tech', 'password': 's3cret-pass'})
        self.assertEqual(response.status_code, 200)
        token = response.json()['access_token']
        response = self.client.get(reverse('repairs:customer_collection'), HTTP_AUTHORIZATION=f'Bearer {token}')
        self.assertEqual(response.status_code, 200)

    def test_login_rejects_bad_password(self):
        response = self.post_json(reverse('repairs:login'), {'username': 'tech', 'password': 'wrong'})
        self.assertEqual(response.status_code, 401)

    def test_requests_without_token_are_rejected(self):
        response = self.client.get(reverse('repairs:customer_collection'))
        self.assertEqual(response.status_code, 401)
        response = self.client.get(reverse('repairs:device_list'), HTTP_AUTHORIZATION='Bearer garbage')
        self.assertEqual(response.status_code, 401)
        response = self.post_json(reverse('repairs:customer_collection'), {'customer_name': 'Acme', 'phone_number': '1'})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(Customer.objects.count(), 0)

    def test_inactive_user_token_is_rejected(self):
        token = create_access_token(self.user)
        self.user.is_active = False
        self.user.save()
        response = self.client.get(reverse('repairs:customer_collection'), HTTP_AUTHORIZATION=f'Bearer {token}')
        self.assertEqual(response.status_code, 401)

    def test_create_customer(self):
        payload = {
            'customer_name': 'Acme',
            'phone_number': '0812345678',
            'contact_person': 'John',
            'shop_address': {'street': '1 Silom'},
            'devices': [printer('SN1', warranty_end_date='2026-12-31')],
        }
        response = self.post_json(reverse('repairs:customer_collection'), payload, **self.auth)
        self.assertEqual(response.status_code, 201)

        data = response.json()
        self.assertEqual(data['customer_name'], 'Acme')
        self.assertEqual(data['created_by'], self.user.pk)
        self.assertEqual(data['shop_address'], {'street': '1 Silom'})
        # Timestamps are ISO-8601 strings
        datetime.datetime.fromisoformat(data['created_at'])
        self.assertEqual(len(data['devices']), 1)
        device = data['devices'][0]['device']
        self.assertEqual(device['serial_number'], 'SN1')
        self.assertEqual(device['warranty_end_date'], '2026-12-31')
        self.assertEqual(device['device_type']['model'], 'L3210')

    def test_create_customer_with_bad_date_returns_400(self):
        payload = {'customer_name': 'Acme', 'phone_number': '1', 'devices': [printer('SN1', warranty_end_date='31-31-2026')]}
        response = self.post_json(reverse('repairs:customer_collection'), payload, **self.auth)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['status'], 'error')
        self.assertEqual(Customer.objects.count(), 0)
        self.assertEqual(Device.objects.count(), 0)

    def test_create_customer_missing_name_returns_400(self):
        response = self.post_json(reverse('repairs:customer_collection'), {'phone_number': '1'}, **self.auth)
        self.assertEqual(response.status_code, 400)
        self.assertIn('customer_name', response.json()['errors'])

    def test_malformed_json_returns_400(self):
        response = self.client.post(reverse('repairs:customer_collection'), data='{not json', content_type='application/json', **self.auth)
        self.assertEqual(response.status_code, 400)

    def test_list_customers_most_recently_updated_first(self):
        older = services.register_customer({'customer_name': 'Older', 'phone_number': '1'})
        newer = services.register_customer({'customer_name': 'Newer', 'phone_number': '2'})
        Customer.objects.filter(pk=older.pk).update(updated_at=timezone.now() - datetime.timedelta(days=1))

        response = self.client.get(reverse('repairs:customer_collection'), **self.auth)
        self.assertEqual(response.status_code, 200)
        names = [c['customer_name'] for c in response.json()]
        self.assertEqual(names, ['Newer', 'Older'])
        self.assertEqual(response.json()[0]['customer_id'], str(newer.customer_id))

    def test_customer_detail(self):
        customer = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1')])
        response = self.client.get(reverse('repairs:customer_detail', args=[customer.customer_id]), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['devices'][0]['device']['serial_number'], 'SN1')

    def test_customer_detail_not_found(self):
        response = self.client.get(reverse('repairs:customer_detail', args=['does-not-exist']), **self.auth)
        self.assertEqual(response.status_code, 404)

    def test_update_customer(self):
        customer = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'})
        response = self.client.put(
            reverse('repairs:customer_detail', args=[customer.customer_id]),
            data=json.dumps({'customer_name': 'Acme Ltd', 'phone_number': '2', 'contact_email': 'ops@acme.test'}),
            content_type='application/json',
            **self.auth,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['customer_name'], 'Acme Ltd')
        self.assertEqual(response.json()['contact_email'], 'ops@acme.test')

    def test_update_customer_invalid_email(self):
        customer = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'})
        response = self.client.put(
            reverse('repairs:customer_detail', args=[customer.customer_id]),
            data=json.dumps({'customer_name': 'Acme', 'phone_number': '1', 'contact_email': 'not-an-email'}),
            content_type='application/json',
            **self.auth,
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn('contact_email', response.json()['errors'])

    def test_delete_customer(self):
        customer = services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1')])
        response = self.client.delete(reverse('repairs:customer_detail', args=[customer.customer_id]), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], 'Customer deleted successfully')
        self.assertFalse(Customer.objects.exists())
        self.assertTrue(Device.objects.filter(serial_number='SN1').exists())

    def test_update_to_taken_serial_returns_400(self):
        services.register_customer({'customer_name': 'Acme', 'phone_number': '1'}, devices=[printer('SN1')])
        other = services.register_customer({'customer_name': 'Beta', 'phone_number': '2'}, devices=[printer('SN2')])
        device = Device.objects.get(serial_number='SN2')

        response = self.client.put(
            reverse('repairs:customer_detail', args=[other.customer_id]),
            data=json.dumps({'customer_name': 'Beta', 'phone_number': '2', 'devices': [{'device_id': str(device.device_id), 'serial_number': 'SN1'}]}),
            content_type='application/json',
            **self.auth,
        )
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertIn('serial_number', body['errors'])
        self.assertNotIn('UNIQUE', body['message'])
        device.refresh_from_db()
        self.assertEqual(device.serial_number, 'SN2')

    def test_method_not_allowed(self):
        response = self.client.patch(reverse('repairs:customer_collection'), **self.auth)
        self.assertEqual(response.status_code, 405)


class DeviceApiTest(TestCase):
    def setUp(self):
        self.client = Client()
        self.user = User.objects.create_user(username='tech', password='s3cret-pass')
        self.auth = {'HTTP_AUTHORIZATION': f'Bearer {create_access_token(self.user)}'}
        services.register_customer(
            {'customer_name': 'Acme', 'phone_number': '1'},
            devices=[
                printer('SN1'),
                {'serial_number': 'LT-7', 'device_type': {'device_type': 'Laptop', 'brand': 'Dell', 'model': 'XPS 13'}},
            ],
        )

    def test_device_list(self):
        response = self.client.get(reverse('repairs:device_list'), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(sorted(d['serial_number'] for d in response.json()), ['LT-7', 'SN1'])

    def test_device_types_sorted_by_type(self):
        response = self.client.get(reverse('repairs:device_type_list'), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual([t['device_type'] for t in response.json()], ['Laptop', 'Printer'])

    def test_device_by_serial(self):
        response = self.client.get(reverse('repairs:device_by_serial', args=['LT-7']), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['device_type']['brand'], 'Dell')

    def test_device_by_serial_not_found(self):
        response = self.client.get(reverse('repairs:device_by_serial', args=['UNKNOWN']), **self.auth)
        self.assertEqual(response.status_code, 404)

    def test_device_detail(self):
        device = Device.objects.get(serial_number='SN1')
        response = self.client.get(reverse('repairs:device_detail', args=[device.device_id]), **self.auth)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['device_id'], str(device.device_id))

    def test_device_detail_not_found(self):
        response = self.client.get(reverse('repairs:device_detail', args=['00000000-0000-0000-0000-000000000000']), **self.auth)
        self.assertEqual(response.status_code, 404)
