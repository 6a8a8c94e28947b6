from ami_publisher.models import StoreKey


def test_store_key_composition():
    key = StoreKey(project_name="kafka", root_device_type="ebs", project_version="2")
    assert key.prefix == "amis/kafka/ebs/2"
    assert key.data_key == "amis/kafka/ebs/2/data"
    assert key.ami_key == "amis/kafka/ebs/2/ami"

def test_store_key_instance_store():
    key = StoreKey(project_name="zookeeper", root_device_type="instance-store", project_version="3.4.6")
    assert key.data_key == "amis/zookeeper/instance-store/3.4.6/data"
