import pytest
from provisioner.ec2.instances import launch_instance
from provisioner.errors import ConfigurationError, InstanceLaunchError, ResourceNotFoundError
from conftest import make_ec2_client


def test_launch_instance(ec2_client, config, capsys):
    """Test launching one instance in the first subnet."""
    launched = launch_instance(ec2_client, config)

    assert launched.instance_id == "i-123"
    assert launched.subnet_id == "subnet-a"
    ec2_client.run_instances.assert_called_once_with(
        ImageId="ami-0c55b159cbfafe1f0",
        InstanceType="t2.micro",
        MinCount=1,
        MaxCount=1,
        SubnetId="subnet-a",
        KeyName="test-key",
    )
    assert "Using subnet ID: subnet-a" in capsys.readouterr().out


@pytest.mark.parametrize("field,var", [
    ("ami_id", "AMI_ID"),
    ("instance_type", "INSTANCE_TYPE"),
    ("key_name", "KEY_NAME"),
])
def test_launch_instance_missing_config(ec2_client, config, field, var):
    """Test that each setting is checked before subnets are listed."""
    with pytest.raises(ConfigurationError, match=f"{var} environment variable is not set"):
        launch_instance(ec2_client, config._replace(**{field: None}))

    ec2_client.describe_subnets.assert_not_called()
    ec2_client.run_instances.assert_not_called()


def test_launch_instance_no_subnets(config):
    client = make_ec2_client(subnet_ids=())

    with pytest.raises(ResourceNotFoundError, match="no subnets found"):
        launch_instance(client, config)

    client.run_instances.assert_not_called()


def test_launch_instance_nothing_created(config):
    """Test that an empty successful response is treated as a failure."""
    client = make_ec2_client(instance_ids=())

    with pytest.raises(InstanceLaunchError, match="no instances were created"):
        launch_instance(client, config)
