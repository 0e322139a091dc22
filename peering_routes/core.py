# Copyright 2023, Chariot Solutions
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


""" Defines core data classes for the route propagator.
    """

from collections import namedtuple

PeeringRoute = namedtuple('PeeringRoute', ['destination_cidr', 'peering_connection_id'])

RouteResult = namedtuple('RouteResult', ['route_table_id', 'status', 'message'])

CREATED = "created"
SKIPPED = "skipped"
FAILED = "failed"


class MainRouteTableNotFound(Exception):
    """ Raised when a VPC has no route table flagged as main, or when the
        lookup itself fails.
        """

    def __init__(self, vpc_id, reason=None):
        message = f"Could not find main route table for {vpc_id}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.vpc_id = vpc_id
        self.reason = reason
