""" Code to retrieve the route tables and subnets of a VPC, and to determine which
    route table each subnet actually uses.
    """

from botocore.exceptions import BotoCoreError, ClientError

from ..core import MainRouteTableNotFound


class Vpc:
    """ Maintains the subnets of interest for a VPC, along with the associations
        needed to map them onto route tables.
        """

    def __init__(self, vpc_id, main_route_table_id, subnet_ids, associations):
        self.vpc_id = vpc_id
        self.main_route_table_id = main_route_table_id
        self.subnet_ids = subnet_ids
        self.associations = associations

    def target_route_tables(self):
        return compute_targets(self.subnet_ids, self.associations, self.main_route_table_id)


def resolve_main_route_table(ec2_client, vpc_id):
    """ Returns the ID of the VPC's main route table. Any failure to find it,
        including an AWS error from the describe call, raises MainRouteTableNotFound.
        """
    filters = vpc_filter(vpc_id) + [{'Name': "association.main", 'Values': ["true"]}]
    try:
        route_tables = ec2_client.describe_route_tables(Filters=filters)['RouteTables']
    except (ClientError, BotoCoreError) as ex:
        raise MainRouteTableNotFound(vpc_id, str(ex)) from ex
    if not route_tables:
        raise MainRouteTableNotFound(vpc_id)
    return route_tables[0]['RouteTableId']


def resolve_matching_subnets(ec2_client, vpc_id, name_filter):
    filters = vpc_filter(vpc_id) + [{'Name': "tag:Name", 'Values': [name_filter]}]
    subnets = ec2_client.describe_subnets(Filters=filters)['Subnets']
    return set(subnet['SubnetId'] for subnet in subnets)


def resolve_explicit_associations(ec2_client, vpc_id):
    """ Builds a map of subnet ID to route table ID from every route table in
        the VPC, using a single describe call. The main association carries no
        subnet and is skipped.
        """
    result = {}
    route_tables = ec2_client.describe_route_tables(Filters=vpc_filter(vpc_id))['RouteTables']
    for rt in route_tables:
        for assoc in rt.get('Associations', []):
            subnet_id = assoc.get('SubnetId')
            if subnet_id:
                result[subnet_id] = assoc.get('RouteTableId', rt['RouteTableId'])
    return result


def compute_targets(subnet_ids, associations, main_route_table_id):
    """ Returns the set of route tables used by the given subnets: the explicitly
        associated table where there is one, otherwise the main table.
        """
    return set(associations.get(subnet_id) or main_route_table_id for subnet_id in subnet_ids)


def vpc_filter(vpc_id):
    return [{'Name': "vpc-id", 'Values': [vpc_id]}]
