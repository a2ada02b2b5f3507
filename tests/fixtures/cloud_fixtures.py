"""Trimmed vendor JSON documents for the cloud range tests."""

from __future__ import annotations

from typing import Any, Dict, List

AWS_IP_RANGES: Dict[str, Any] = {
    "syncToken": "1700000000",
    "createDate": "2023-11-14-22-13-20",
    "prefixes": [
        {
            "ip_prefix": "3.5.140.0/22",
            "region": "ap-northeast-2",
            "service": "AMAZON",
            "network_border_group": "ap-northeast-2",
        },
        {
            "ip_prefix": "52.95.110.0/24",
            "region": "us-east-1",
            "service": "S3",
            "network_border_group": "us-east-1",
        },
        {
            "ip_prefix": "15.230.39.0/24",
            "region": "GLOBAL",
            "service": "EC2",
            "network_border_group": "GLOBAL",
        },
        {
            "ip_prefix": "not-a-network",
            "region": "us-east-1",
            "service": "EC2",
            "network_border_group": "us-east-1",
        },
        {
            "ip_prefix": "18.0.0.0/33",
            "region": "us-east-1",
            "service": "EC2",
            "network_border_group": "us-east-1",
        },
    ],
    "ipv6_prefixes": [
        {
            "ipv6_prefix": "2600:1f14::/35",
            "region": "us-west-2",
            "service": "EC2",
            "network_border_group": "us-west-2",
        },
    ],
}

AZURE_SERVICE_TAGS: Dict[str, Any] = {
    "changeNumber": 240,
    "cloud": "Public",
    "values": [
        {
            "name": "AzureStorage.WestEurope",
            "id": "AzureStorage.WestEurope",
            "properties": {
                "changeNumber": 12,
                "region": "westeurope",
                "regionId": 18,
                "platform": "Azure",
                "systemService": "AzureStorage",
                "addressPrefixes": ["20.38.64.0/19", "2603:1020:200::/46", "garbage"],
                "networkFeatures": ["API", "NSG"],
            },
        },
        {
            "name": "AzureFrontDoor.Frontend",
            "id": "AzureFrontDoor.Frontend",
            "properties": {
                "changeNumber": 3,
                "region": "",
                "regionId": 0,
                "platform": "Azure",
                "systemService": "AzureFrontDoor",
                "addressPrefixes": ["13.107.246.0/24"],
            },
        },
        {
            "name": "AzureCloud",
            "id": "AzureCloud",
            "properties": {
                "changeNumber": 1,
                "region": "",
                "platform": "Azure",
                "systemService": "",
                "addressPrefixes": ["4.0.0.0/8"],
            },
        },
    ],
}

O365_ENDPOINTS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "serviceArea": "Exchange",
        "serviceAreaDisplayName": "Exchange Online",
        "urls": ["outlook.office.com"],
        "ips": ["13.107.6.152/31", "2603:1006::/40"],
        "tcpPorts": "80,443",
        "expressRoute": True,
        "category": "Optimize",
        "required": True,
    },
    {
        "id": 46,
        "serviceArea": "Common",
        "serviceAreaDisplayName": "Microsoft 365 Common and Office Online",
        "urls": ["*.msftidentity.com"],
        "ips": ["20.20.32.0/19", "bogus/99"],
        "tcpPorts": "443",
        "expressRoute": False,
        "category": "Default",
        "required": True,
    },
    {
        "id": 56,
        "serviceArea": "Common",
        "urls": ["*.office.com"],
        "tcpPorts": "443",
        "category": "Default",
        "required": True,
    },
]
