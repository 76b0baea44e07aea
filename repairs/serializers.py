def _iso(value):
    return value.isoformat() if value else None


def device_type_to_dict(device_type):
    return {
        'id': device_type.id,
        'device_type': device_type.device_type,
        'brand': device_type.brand,
        'model': device_type.model,
        'common_issues': device_type.common_issues,
        'created_at': _iso(device_type.created_at),
        'updated_at': _iso(device_type.updated_at),
    }


def device_to_dict(device):
    return {
        'device_id': str(device.device_id),
        'serial_number': device.serial_number,
        'installation_location': device.installation_location,
        'warranty_end_date': _iso(device.warranty_end_date),
        'device_type_id': device.device_type_id,
        'device_type': device_type_to_dict(device.device_type),
        'created_at': _iso(device.created_at),
        'updated_at': _iso(device.updated_at),
    }


def customer_device_to_dict(link):
    return {
        'customer_id': str(link.customer_id),
        'device_id': str(link.device_id),
        'start_date': _iso(link.start_date),
        'created_by': link.created_by_id,
        'device': device_to_dict(link.device),
    }


def customer_to_dict(customer, include_devices=True):
    data = {
        'customer_id': str(customer.customer_id),
        'customer_name': customer.customer_name,
        'company_name': customer.company_name,
        'contact_person': customer.contact_person,
        'phone_number': customer.phone_number,
        'contact_tel': customer.contact_tel,
        'contact_email': customer.contact_email,
        'contact_line_id': customer.contact_line_id,
        'shop_name': customer.shop_name,
        'shop_address': customer.get_shop_address(),
        'company_address': customer.get_company_address(),
        'created_by': customer.created_by_id,
        'created_at': _iso(customer.created_at),
        'updated_at': _iso(customer.updated_at),
    }
    if include_devices:
        data['devices'] = [customer_device_to_dict(link) for link in customer.customer_devices.all()]
    return data
