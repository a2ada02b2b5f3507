"""Known vendor enumeration values and the shared constant each one maps to.

Pure data consumed by :mod:`ipmetaindex.ingest.canonical`. Keys are the raw
values as they appear in the vendor feeds; values are the labels stored in the
index. A few feeds prefix their labels (``AWS-``, ``Azure-``) so that region
codes from different providers never collide.
"""

from __future__ import annotations

from typing import Dict


AWS_SERVICES: Dict[str, str] = {
    "AMAZON": "AMAZON",
    "AMAZON_APPFLOW": "AMAZON_APPFLOW",
    "AMAZON_CONNECT": "AMAZON_CONNECT",
    "API_GATEWAY": "API_GATEWAY",
    "CHIME_MEETINGS": "CHIME_MEETINGS",
    "CHIME_VOICECONNECTOR": "CHIME_VOICECONNECTOR",
    "CLOUD9": "CLOUD9",
    "CLOUDFRONT": "CLOUDFRONT",
    "CLOUDFRONT_ORIGIN_FACING": "CLOUDFRONT_ORIGIN_FACING",
    "CODEBUILD": "CODEBUILD",
    "DYNAMODB": "DYNAMODB",
    "EBS": "EBS",
    "EC2": "EC2",
    "EC2_INSTANCE_CONNECT": "EC2_INSTANCE_CONNECT",
    "GLOBALACCELERATOR": "GLOBALACCELERATOR",
    "KINESIS_VIDEO_STREAMS": "KINESIS_VIDEO_STREAMS",
    "ROUTE53": "ROUTE53",
    "ROUTE53_HEALTHCHECKS": "ROUTE53_HEALTHCHECKS",
    "ROUTE53_HEALTHCHECKS_PUBLISHING": "ROUTE53_HEALTHCHECKS_PUBLISHING",
    "ROUTE53_RESOLVER": "ROUTE53_RESOLVER",
    "S3": "S3",
    "WORKSPACES_GATEWAYS": "WORKSPACES_GATEWAYS",
}

AWS_REGIONS: Dict[str, str] = {
    "ap-east-1": "AWS-ap-east-1",
    "ap-northeast-1": "AWS-ap-northeast-1",
    "ap-northeast-2": "AWS-ap-northeast-2",
    "ap-northeast-3": "AWS-ap-northeast-3",
    "ap-south-1": "AWS-ap-south-1",
    "ap-southeast-1": "AWS-ap-southeast-1",
    "ap-southeast-2": "AWS-ap-southeast-2",
    "ca-central-1": "AWS-ca-central-1",
    "cn-north-1": "AWS-cn-north-1",
    "cn-northwest-1": "AWS-cn-northwest-1",
    "eu-central-1": "AWS-eu-central-1",
    "eu-central-2": "AWS-eu-central-2",
    "eu-north-1": "AWS-eu-north-1",
    "eu-south-1": "AWS-eu-south-1",
    "eu-south-2": "AWS-eu-south-2",
    "eu-west-1": "AWS-eu-west-1",
    "eu-west-2": "AWS-eu-west-2",
    "eu-west-3": "AWS-eu-west-3",
    "me-central-1": "AWS-me-central-1",
    "me-south-1": "AWS-me-south-1",
    "sa-east-1": "AWS-sa-east-1",
    "us-east-1": "AWS-us-east-1",
    "us-east-2": "AWS-us-east-2",
    "us-gov-east-1": "AWS-us-gov-east-1",
    "us-gov-west-1": "AWS-us-gov-west-1",
    "us-west-1": "AWS-us-west-1",
    "us-west-2": "AWS-us-west-2",
    "GLOBAL": "AWS-GLOBAL",
}

AZURE_SERVICES: Dict[str, str] = {
    "ActionGroup": "AzureActionGroup",
    "ApplicationInsightsAvailability": "AzureApplicationInsightsAvailability",
    "AutonomousDevelopmentPlatform": "AzureAutonomousDevelopmentPlatform",
    "AzureAD": "AzureAD",
    "AzureAPIForFHIR": "AzureAPIForFHIR",
    "AzureAdvancedThreatProtection": "AzureAdvancedThreatProtection",
    "AzureApiManagement": "AzureApiManagement",
    "AzureAppConfiguration": "AzureAppConfiguration",
    "AzureAppService": "AzureAppService",
    "AzureAppServiceManagement": "AzureAppServiceManagement",
    "AzureArcInfrastructure": "AzureArcInfrastructure",
    "AzureAttestation": "AzureAttestation",
    "AzureAutomation": "AzureAutomation",
    "AzureBackup": "AzureBackup",
    "AzureBotService": "AzureBotService",
    "AzureCognitiveSearch": "AzureCognitiveSearch",
    "AzureConnectors": "AzureConnectors",
    "AzureContainerRegistry": "AzureContainerRegistry",
    "AzureCosmosDB": "AzureCosmosDB",
    "AzureDataExplorerManagement": "AzureDataExplorerManagement",
    "AzureDataLake": "AzureDataLake",
    "AzureDatabricks": "AzureDatabricks",
    "AzureDevOps": "AzureDevOps",
    "AzureDevSpaces": "AzureDevSpaces",
    "AzureDigitalTwins": "AzureDigitalTwins",
    "AzureEventGrid": "AzureEventGrid",
    "AzureEventHub": "AzureEventHub",
    "AzureInformationProtection": "AzureInformationProtection",
    "AzureIoTHub": "AzureIoTHub",
    "AzureKeyVault": "AzureKeyVault",
    "AzureLoadTestingInstanceManagement": "AzureLoadTestingInstanceManagement",
    "AzureMachineLearning": "AzureMachineLearning",
    "AzureMonitor": "AzureMonitor",
    "AzureOpenDatasets": "AzureOpenDatasets",
    "AzurePortal": "AzurePortal",
    "AzureResourceManager": "AzureResourceManager",
    "AzureSQL": "AzureSQL",
    "AzureSecurityCenter": "AzureSecurityCenter",
    "AzureSentinel": "AzureSentinel",
    "AzureServiceBus": "AzureServiceBus",
    "AzureSignalR": "AzureSignalR",
    "AzureSiteRecovery": "AzureSiteRecovery",
    "AzureSphereSecureService_Prod": "AzureSphereSecureService_Prod",
    "AzureStack": "AzureStack",
    "AzureStorage": "AzureStorage",
    "AzureTrafficManager": "AzureTrafficManager",
    "AzureUpdateDelivery": "AzureUpdateDelivery",
    "AzureWebPubSub": "AzureWebPubSub",
    "BatchNodeManagement": "AzureBatchNodeManagement",
    "ChaosStudio": "AzureChaosStudio",
    "CognitiveServicesManagement": "AzureCognitiveServicesManagement",
    "DataFactory": "AzureDataFactory",
    "Dynamics365BusinessCentral": "AzureDynamics365BusinessCentral",
    "Dynamics365ForMarketingEmail": "AzureDynamics365ForMarketingEmail",
    "EOPExtPublished": "AzureEOPExtPublished",
    "GatewayManager": "AzureGatewayManager",
    "Grafana": "AzureGrafana",
    "HDInsight": "AzureHDInsight",
    "LogicApps": "AzureLogicApps",
    "M365ManagementActivityApi": "AzureM365ManagementActivityApi",
    "M365ManagementActivityApiWebhook": "AzureM365ManagementActivityApiWebhook",
    "MicrosoftAzureFluidRelay": "AzureMicrosoftAzureFluidRelay",
    "MicrosoftCloudAppSecurity": "AzureMicrosoftCloudAppSecurity",
    "MicrosoftContainerRegistry": "AzureMicrosoftContainerRegistry",
    "MicrosoftDefenderForEndpoint": "AzureMicrosoftDefenderForEndpoint",
    "OneDsCollector": "AzureOneDsCollector",
    "PowerBI": "AzurePowerBI",
    "PowerPlatformInfra": "AzurePowerPlatformInfra",
    "PowerPlatformPlex": "AzurePowerPlatformPlex",
    "PowerQueryOnline": "AzurePowerQueryOnline",
    "SCCservice": "AzureSCCservice",
    "ServiceFabric": "AzureServiceFabric",
    "SqlManagement": "AzureSqlManagement",
    "StorageSyncService": "AzureStorageSyncService",
    "WindowsAdminCenter": "AzureWindowsAdminCenter",
    "WindowsVirtualDesktop": "AzureWindowsVirtualDesktop",
    "AzureFrontDoor": "AzureFrontDoor",
    "AzureIdentity": "AzureIdentity",
}

AZURE_REGIONS: Dict[str, str] = {
    "australiacentral": "Azure-australiacentral",
    "australiacentral2": "Azure-australiacentral2",
    "australiaeast": "Azure-australiaeast",
    "australiasoutheast": "Azure-australiasoutheast",
    "brazilsouth": "Azure-brazilsouth",
    "brazilse": "Azure-brazilse",
    "canadacentral": "Azure-canadacentral",
    "canadaeast": "Azure-canadaeast",
    "centralindia": "Azure-centralindia",
    "centralus": "Azure-centralus",
    "centraluseuap": "Azure-centraluseuap",
    "eastasia": "Azure-eastasia",
    "eastus": "Azure-eastus",
    "eastus2": "Azure-eastus2",
    "eastus2euap": "Azure-eastus2euap",
    "centralfrance": "Azure-centralfrance",
    "southfrance": "Azure-southfrance",
    "germanyn": "Azure-germanyn",
    "germanywc": "Azure-germanywc",
    "japaneast": "Azure-japaneast",
    "japanwest": "Azure-japanwest",
    "jioindiacentral": "Azure-jioindiacentral",
    "jioindiawest": "Azure-jioindiawest",
    "koreacentral": "Azure-koreacentral",
    "northcentralus": "Azure-northcentralus",
    "northeurope": "Azure-northeurope",
    "norwaye": "Azure-norwaye",
    "norwayw": "Azure-norwayw",
    "qatarcentral": "Azure-qatarcentral",
    "southafricanorth": "Azure-southafricanorth",
    "southafricawest": "Azure-southafricawest",
    "southcentralus": "Azure-southcentralus",
    "southindia": "Azure-southindia",
    "southeastasia": "Azure-southeastasia",
    "swedencentral": "Azure-swedencentral",
    "swedensouth": "Azure-swedensouth",
    "switzerlandn": "Azure-switzerlandn",
    "switzerlandw": "Azure-switzerlandw",
    "uaecentral": "Azure-uaecentral",
    "uaenorth": "Azure-uaenorth",
    "uknorth": "Azure-uknorth",
    "uksouth": "Azure-uksouth",
    "uksouth2": "Azure-uksouth2",
    "ukwest": "Azure-ukwest",
    "westcentralus": "Azure-westcentralus",
    "westeurope": "Azure-westeurope",
    "westindia": "Azure-westindia",
    "westus": "Azure-westus",
    "westus2": "Azure-westus2",
    "westus3": "Azure-westus3",
    "koreasouth": "Azure-koreasouth",
    "usstagec": "Azure-usstagec",
    "brazilne": "Azure-brazilne",
    "northeurope2": "Azure-northeurope2",
}

CONTINENT_CODES: Dict[str, str] = {
    "AF": "AF",
    "AS": "AS",
    "EU": "EU",
    "OC": "OC",
    "AN": "AN",
    "SA": "SA",
    "NA": "NA",
}

CONTINENT_NAMES: Dict[str, str] = {
    "Africa": "Africa",
    "Asia": "Asia",
    "Europe": "Europe",
    "Oceania": "Oceania",
    "Antartica": "Antartica",
    "South America": "South America",
    "North America": "North America",
    "\"South America\"": "South America",
    "\"North America\"": "North America",
}

COUNTRY_ISO_CODES: Dict[str, str] = {
    "RW": "RW",
    "SO": "SO",
    "YE": "YE",
    "IQ": "IQ",
    "SA": "SA",
    "IR": "IR",
    "CY": "CY",
    "TZ": "TZ",
    "SY": "SY",
    "AM": "AM",
    "KE": "KE",
    "CD": "CD",
    "DJ": "DJ",
    "UG": "UG",
    "CF": "CF",
    "SC": "SC",
    "JO": "JO",
    "LB": "LB",
    "KW": "KW",
    "OM": "OM",
    "QA": "QA",
    "BH": "BH",
    "AE": "AE",
    "IL": "IL",
    "TR": "TR",
    "ET": "ET",
    "ER": "ER",
    "EG": "EG",
    "SD": "SD",
    "GR": "GR",
    "BI": "BI",
    "EE": "EE",
    "LV": "LV",
    "AZ": "AZ",
    "LT": "LT",
    "SJ": "SJ",
    "GE": "GE",
    "MD": "MD",
    "BY": "BY",
    "FI": "FI",
    "AX": "AX",
    "UA": "UA",
    "MK": "MK",
    "HU": "HU",
    "BG": "BG",
    "AL": "AL",
    "PL": "PL",
    "RO": "RO",
    "XK": "XK",
    "ZW": "ZW",
    "ZM": "ZM",
    "KM": "KM",
    "MW": "MW",
    "LS": "LS",
    "BW": "BW",
    "MU": "MU",
    "SZ": "SZ",
    "RE": "RE",
    "ZA": "ZA",
    "YT": "YT",
    "MZ": "MZ",
    "MG": "MG",
    "AF": "AF",
    "PK": "PK",
    "BD": "BD",
    "TM": "TM",
    "TJ": "TJ",
    "LK": "LK",
    "BT": "BT",
    "IN": "IN",
    "MV": "MV",
    "IO": "IO",
    "NP": "NP",
    "MM": "MM",
    "UZ": "UZ",
    "KZ": "KZ",
    "KG": "KG",
    "TF": "TF",
    "HM": "HM",
    "CC": "CC",
    "PW": "PW",
    "VN": "VN",
    "TH": "TH",
    "ID": "ID",
    "LA": "LA",
    "TW": "TW",
    "PH": "PH",
    "MY": "MY",
    "CN": "CN",
    "HK": "HK",
    "BN": "BN",
    "MO": "MO",
    "KH": "KH",
    "KR": "KR",
    "JP": "JP",
    "KP": "KP",
    "SG": "SG",
    "CK": "CK",
    "TL": "TL",
    "RU": "RU",
    "MN": "MN",
    "AU": "AU",
    "CX": "CX",
    "MH": "MH",
    "FM": "FM",
    "PG": "PG",
    "SB": "SB",
    "TV": "TV",
    "NR": "NR",
    "VU": "VU",
    "NC": "NC",
    "NF": "NF",
    "NZ": "NZ",
    "FJ": "FJ",
    "LY": "LY",
    "CM": "CM",
    "SN": "SN",
    "CG": "CG",
    "PT": "PT",
    "LR": "LR",
    "CI": "CI",
    "GH": "GH",
    "GQ": "GQ",
    "NG": "NG",
    "BF": "BF",
    "TG": "TG",
    "GW": "GW",
    "MR": "MR",
    "BJ": "BJ",
    "GA": "GA",
    "SL": "SL",
    "ST": "ST",
    "GI": "GI",
    "GM": "GM",
    "GN": "GN",
    "TD": "TD",
    "NE": "NE",
    "ML": "ML",
    "EH": "EH",
    "TN": "TN",
    "ES": "ES",
    "MA": "MA",
    "MT": "MT",
    "DZ": "DZ",
    "FO": "FO",
    "DK": "DK",
    "IS": "IS",
    "GB": "GB",
    "CH": "CH",
    "SE": "SE",
    "NL": "NL",
    "AT": "AT",
    "BE": "BE",
    "DE": "DE",
    "LU": "LU",
    "IE": "IE",
    "MC": "MC",
    "FR": "FR",
    "AD": "AD",
    "LI": "LI",
    "JE": "JE",
    "IM": "IM",
    "GG": "GG",
    "SK": "SK",
    "CZ": "CZ",
    "NO": "NO",
    "VA": "VA",
    "SM": "SM",
    "IT": "IT",
    "SI": "SI",
    "ME": "ME",
    "HR": "HR",
    "BA": "BA",
    "AO": "AO",
    "NA": "NA",
    "SH": "SH",
    "BV": "BV",
    "BB": "BB",
    "CV": "CV",
    "GY": "GY",
    "GF": "GF",
    "SR": "SR",
    "PM": "PM",
    "GL": "GL",
    "PY": "PY",
    "UY": "UY",
    "BR": "BR",
    "FK": "FK",
    "GS": "GS",
    "JM": "JM",
    "DO": "DO",
    "CU": "CU",
    "MQ": "MQ",
    "BS": "BS",
    "BM": "BM",
    "AI": "AI",
    "TT": "TT",
    "KN": "KN",
    "DM": "DM",
    "AG": "AG",
    "LC": "LC",
    "TC": "TC",
    "AW": "AW",
    "VG": "VG",
    "VC": "VC",
    "MS": "MS",
    "MF": "MF",
    "BL": "BL",
    "GP": "GP",
    "GD": "GD",
    "KY": "KY",
    "BZ": "BZ",
    "SV": "SV",
    "GT": "GT",
    "HN": "HN",
    "NI": "NI",
    "CR": "CR",
    "VE": "VE",
    "EC": "EC",
    "CO": "CO",
    "PA": "PA",
    "HT": "HT",
    "AR": "AR",
    "CL": "CL",
    "BO": "BO",
    "PE": "PE",
    "MX": "MX",
    "PF": "PF",
    "PN": "PN",
    "KI": "KI",
    "TK": "TK",
    "TO": "TO",
    "WF": "WF",
    "WS": "WS",
    "NU": "NU",
    "MP": "MP",
    "GU": "GU",
    "PR": "PR",
    "VI": "VI",
    "UM": "UM",
    "AS": "AS",
    "CA": "CA",
    "US": "US",
    "PS": "PS",
    "RS": "RS",
    "AQ": "AQ",
    "SX": "SX",
    "CW": "CW",
    "BQ": "BQ",
    "SS": "SS",
}

COUNTRY_NAMES: Dict[str, str] = {
    "": "",
    "Rwanda": "Rwanda",
    "Somalia": "Somalia",
    "Yemen": "Yemen",
    "Iraq": "Iraq",
    "Saudi Arabia": "Saudi Arabia",
    "Iran": "Iran",
    "Cyprus": "Cyprus",
    "Tanzania": "Tanzania",
    "Syria": "Syria",
    "Armenia": "Armenia",
    "Kenya": "Kenya",
    "DR Congo": "DR Congo",
    "Djibouti": "Djibouti",
    "Uganda": "Uganda",
    "Central African Republic": "Central African Republic",
    "Seychelles": "Seychelles",
    "Jordan": "Jordan",
    "Lebanon": "Lebanon",
    "Kuwait": "Kuwait",
    "Oman": "Oman",
    "Qatar": "Qatar",
    "Bahrain": "Bahrain",
    "United Arab Emirates": "United Arab Emirates",
    "Israel": "Israel",
    "Turkey": "Turkey",
    "Ethiopia": "Ethiopia",
    "Eritrea": "Eritrea",
    "Egypt": "Egypt",
    "Sudan": "Sudan",
    "Greece": "Greece",
    "Burundi": "Burundi",
    "Estonia": "Estonia",
    "Latvia": "Latvia",
    "Azerbaijan": "Azerbaijan",
    "Lithuania": "Lithuania",
    "Svalbard and Jan Mayen": "Svalbard and Jan Mayen",
    "Georgia": "Georgia",
    "Moldova": "Moldova",
    "Belarus": "Belarus",
    "Finland": "Finland",
    "Åland Islands": "Åland Islands",
    "Ukraine": "Ukraine",
    "North Macedonia": "North Macedonia",
    "Hungary": "Hungary",
    "Bulgaria": "Bulgaria",
    "Albania": "Albania",
    "Poland": "Poland",
    "Romania": "Romania",
    "Kosovo": "Kosovo",
    "Zimbabwe": "Zimbabwe",
    "Zambia": "Zambia",
    "Comoros": "Comoros",
    "Malawi": "Malawi",
    "Lesotho": "Lesotho",
    "Botswana": "Botswana",
    "Mauritius": "Mauritius",
    "Eswatini": "Eswatini",
    "Réunion": "Réunion",
    "South Africa": "South Africa",
    "Mayotte": "Mayotte",
    "Mozambique": "Mozambique",
    "Madagascar": "Madagascar",
    "Afghanistan": "Afghanistan",
    "Pakistan": "Pakistan",
    "Bangladesh": "Bangladesh",
    "Turkmenistan": "Turkmenistan",
    "Tajikistan": "Tajikistan",
    "Sri Lanka": "Sri Lanka",
    "Bhutan": "Bhutan",
    "India": "India",
    "Maldives": "Maldives",
    "British Indian Ocean Territory": "British Indian Ocean Territory",
    "Nepal": "Nepal",
    "Myanmar": "Myanmar",
    "Uzbekistan": "Uzbekistan",
    "Kazakhstan": "Kazakhstan",
    "Kyrgyzstan": "Kyrgyzstan",
    "French Southern Territories": "French Southern Territories",
    "Heard and McDonald Islands": "Heard and McDonald Islands",
    "Cocos (Keeling) Islands": "Cocos (Keeling) Islands",
    "Palau": "Palau",
    "Vietnam": "Vietnam",
    "Thailand": "Thailand",
    "Indonesia": "Indonesia",
    "Laos": "Laos",
    "Taiwan": "Taiwan",
    "Philippines": "Philippines",
    "Malaysia": "Malaysia",
    "China": "China",
    "Hong Kong": "Hong Kong",
    "Brunei": "Brunei",
    "Macao": "Macao",
    "Cambodia": "Cambodia",
    "South Korea": "South Korea",
    "Japan": "Japan",
    "North Korea": "North Korea",
    "Singapore": "Singapore",
    "Cook Islands": "Cook Islands",
    "Timor-Leste": "Timor-Leste",
    "Russia": "Russia",
    "Mongolia": "Mongolia",
    "Australia": "Australia",
    "Christmas Island": "Christmas Island",
    "Marshall Islands": "Marshall Islands",
    "Federated States of Micronesia": "Federated States of Micronesia",
    "Papua New Guinea": "Papua New Guinea",
    "Solomon Islands": "Solomon Islands",
    "Tuvalu": "Tuvalu",
    "Nauru": "Nauru",
    "Vanuatu": "Vanuatu",
    "New Caledonia": "New Caledonia",
    "Norfolk Island": "Norfolk Island",
    "New Zealand": "New Zealand",
    "Fiji": "Fiji",
    "Libya": "Libya",
    "Cameroon": "Cameroon",
    "Senegal": "Senegal",
    "Congo Republic": "Congo Republic",
    "Portugal": "Portugal",
    "Liberia": "Liberia",
    "Ivory Coast": "Ivory Coast",
    "Ghana": "Ghana",
    "Equatorial Guinea": "Equatorial Guinea",
    "Nigeria": "Nigeria",
    "Burkina Faso": "Burkina Faso",
    "Togo": "Togo",
    "Guinea-Bissau": "Guinea-Bissau",
    "Mauritania": "Mauritania",
    "Benin": "Benin",
    "Gabon": "Gabon",
    "Sierra Leone": "Sierra Leone",
    "São Tomé and Príncipe": "São Tomé and Príncipe",
    "Gibraltar": "Gibraltar",
    "Gambia": "Gambia",
    "Guinea": "Guinea",
    "Chad": "Chad",
    "Niger": "Niger",
    "Mali": "Mali",
    "Western Sahara": "Western Sahara",
    "Tunisia": "Tunisia",
    "Spain": "Spain",
    "Morocco": "Morocco",
    "Malta": "Malta",
    "Algeria": "Algeria",
    "Faroe Islands": "Faroe Islands",
    "Denmark": "Denmark",
    "Iceland": "Iceland",
    "United Kingdom": "United Kingdom",
    "Switzerland": "Switzerland",
    "Sweden": "Sweden",
    "Netherlands": "Netherlands",
    "Austria": "Austria",
    "Belgium": "Belgium",
    "Germany": "Germany",
    "Luxembourg": "Luxembourg",
    "Ireland": "Ireland",
    "Monaco": "Monaco",
    "France": "France",
    "Andorra": "Andorra",
    "Liechtenstein": "Liechtenstein",
    "Jersey": "Jersey",
    "Isle of Man": "Isle of Man",
    "Guernsey": "Guernsey",
    "Slovakia": "Slovakia",
    "Czechia": "Czechia",
    "Norway": "Norway",
    "Vatican City": "Vatican City",
    "San Marino": "San Marino",
    "Italy": "Italy",
    "Slovenia": "Slovenia",
    "Montenegro": "Montenegro",
    "Croatia": "Croatia",
    "Bosnia and Herzegovina": "Bosnia and Herzegovina",
    "Angola": "Angola",
    "Namibia": "Namibia",
    "Saint Helena": "Saint Helena",
    "Bouvet Island": "Bouvet Island",
    "Barbados": "Barbados",
    "Cabo Verde": "Cabo Verde",
    "Guyana": "Guyana",
    "French Guiana": "French Guiana",
    "Suriname": "Suriname",
    "Saint Pierre and Miquelon": "Saint Pierre and Miquelon",
    "Greenland": "Greenland",
    "Paraguay": "Paraguay",
    "Uruguay": "Uruguay",
    "Brazil": "Brazil",
    "Falkland Islands": "Falkland Islands",
    "South Georgia and the South Sandwich Islands": "South Georgia and the South Sandwich Islands",
    "Jamaica": "Jamaica",
    "Dominican Republic": "Dominican Republic",
    "Cuba": "Cuba",
    "Martinique": "Martinique",
    "Bahamas": "Bahamas",
    "Bermuda": "Bermuda",
    "Anguilla": "Anguilla",
    "Trinidad and Tobago": "Trinidad and Tobago",
    "St Kitts and Nevis": "St Kitts and Nevis",
    "Dominica": "Dominica",
    "Antigua and Barbuda": "Antigua and Barbuda",
    "Saint Lucia": "Saint Lucia",
    "Turks and Caicos Islands": "Turks and Caicos Islands",
    "Aruba": "Aruba",
    "British Virgin Islands": "British Virgin Islands",
    "St Vincent and Grenadines": "St Vincent and Grenadines",
    "Montserrat": "Montserrat",
    "Saint Martin": "Saint Martin",
    "Saint Barthélemy": "Saint Barthélemy",
    "Guadeloupe": "Guadeloupe",
    "Grenada": "Grenada",
    "Cayman Islands": "Cayman Islands",
    "Belize": "Belize",
    "El Salvador": "El Salvador",
    "Guatemala": "Guatemala",
    "Honduras": "Honduras",
    "Nicaragua": "Nicaragua",
    "Costa Rica": "Costa Rica",
    "Venezuela": "Venezuela",
    "Ecuador": "Ecuador",
    "Colombia": "Colombia",
    "Panama": "Panama",
    "Haiti": "Haiti",
    "Argentina": "Argentina",
    "Chile": "Chile",
    "Bolivia": "Bolivia",
    "Peru": "Peru",
    "Mexico": "Mexico",
    "French Polynesia": "French Polynesia",
    "Pitcairn Islands": "Pitcairn Islands",
    "Kiribati": "Kiribati",
    "Tokelau": "Tokelau",
    "Tonga": "Tonga",
    "Wallis and Futuna": "Wallis and Futuna",
    "Samoa": "Samoa",
    "Niue": "Niue",
    "Northern Mariana Islands": "Northern Mariana Islands",
    "Guam": "Guam",
    "Puerto Rico": "Puerto Rico",
    "U.S. Virgin Islands": "U.S. Virgin Islands",
    "U.S. Outlying Islands": "U.S. Outlying Islands",
    "American Samoa": "American Samoa",
    "Canada": "Canada",
    "United States": "United States",
    "Palestine": "Palestine",
    "Serbia": "Serbia",
    "Antarctica": "Antarctica",
    "Sint Maarten": "Sint Maarten",
    "Curaçao": "Curaçao",
    "\"Bonaire, Sint Eustatius, and Saba\"": "Bonaire, Sint Eustatius, and Saba",
    "South Sudan": "South Sudan",
}

TOP_ASN_ORGANIZATIONS: Dict[str, str] = {
    "ATT-INTERNET4": "ATT-INTERNET4",
    "UUNET": "UUNET",
    "Chinanet": "Chinanet",
    "COGENT-174": "COGENT-174",
    "Turk Telekom": "Turk Telekom",
    "DNIC-ASBLK-00721-00726": "DNIC-ASBLK-00721-00726",
    "Korea Telecom": "Korea Telecom",
    "LEVEL3": "LEVEL3",
    "CENTURYLINK-US-LEGACY-QWEST": "CENTURYLINK-US-LEGACY-QWEST",
    "Akamai International B.V.": "Akamai International B.V.",
    "LVLT-3549": "LVLT-3549",
    "SPRINTLINK": "SPRINTLINK",
    "AKAMAI-AS": "AKAMAI-AS",
    "COMCAST-7922": "COMCAST-7922",
    "AMAZON-02": "AMAZON-02",
    "SK Broadband Co Ltd": "SK Broadband Co Ltd",
    "LG DACOM Corporation": "LG DACOM Corporation",
    "DNIC-AS-00749": "DNIC-AS-00749",
    "Rostelecom": "Rostelecom",
    "FRONTIER-FRTR": "FRONTIER-FRTR",
    "China Mobile Communications Group Co., Ltd.": "China Mobile Communications Group Co., Ltd.",
    "WINDSTREAM": "WINDSTREAM",
    "CENTURYLINK-LEGACY-SAVVIS": "CENTURYLINK-LEGACY-SAVVIS",
    "GTT Communications Inc.": "GTT Communications Inc.",
    "ASN-CXA-ALL-CCI-22773-RDC": "ASN-CXA-ALL-CCI-22773-RDC",
    "M247 Europe SRL": "M247 Europe SRL",
    "XO-AS15": "XO-AS15",
    "EGIHOSTING": "EGIHOSTING",
    "China Mobile communications corporation": "China Mobile communications corporation",
    "DNIC-ASBLK-05800-06055": "DNIC-ASBLK-05800-06055",
    "ZAYO-6461": "ZAYO-6461",
    "DNIC-ASBLK-27032-27159": "DNIC-ASBLK-27032-27159",
    "CHINA UNICOM China169 Backbone": "CHINA UNICOM China169 Backbone",
    "Ipxo Uk Limited": "Ipxo Uk Limited",
    "PVimpelCom": "PVimpelCom",
    "BELLSOUTH-NET-BLK": "BELLSOUTH-NET-BLK",
    "DNIC-ASBLK-00306-00371": "DNIC-ASBLK-00306-00371",
    "NTT-LTD-2914": "NTT-LTD-2914",
    "BACOM": "BACOM",
    "Telmex Colombia S.A.": "Telmex Colombia S.A.",
    "JSC ER-Telecom Holding": "JSC ER-Telecom Holding",
    "A1 Bulgaria EAD": "A1 Bulgaria EAD",
    "UCSD": "UCSD",
    "AFCONC-BLOCK1-AS": "AFCONC-BLOCK1-AS",
    "Mega Cable, S.A. de C.V.": "Mega Cable, S.A. de C.V.",
    "Orange": "Orange",
    "TELUS Communications": "TELUS Communications",
    "China Unicom Beijing Province Network": "China Unicom Beijing Province Network",
    "OOO Network of data-centers Selectel": "OOO Network of data-centers Selectel",
    "CHARTER-20115": "CHARTER-20115",
    "Uninet S.A. de C.V.": "Uninet S.A. de C.V.",
    "Datacamp Limited": "Datacamp Limited",
    "TOTAL PLAY TELECOMUNICACIONES SA DE CV": "TOTAL PLAY TELECOMUNICACIONES SA DE CV",
    "TPG Telecom Limited": "TPG Telecom Limited",
    "Superonline Iletisim Hizmetleri A.S.": "Superonline Iletisim Hizmetleri A.S.",
    "TELEFONICA BRASIL S.A": "TELEFONICA BRASIL S.A",
    "Host Europe GmbH": "Host Europe GmbH",
    "PJSC MegaFon": "PJSC MegaFon",
    "China Telecom Group": "China Telecom Group",
    "TWC-10796-MIDWEST": "TWC-10796-MIDWEST",
    "CABLEONE": "CABLEONE",
    "HostRoyale Technologies Pvt Ltd": "HostRoyale Technologies Pvt Ltd",
    "Bharti Airtel Ltd., Telemedia Services": "Bharti Airtel Ltd., Telemedia Services",
    "DACOM-PUBNETPLUS": "DACOM-PUBNETPLUS",
    "Axtel, S.A.B. de C.V.": "Axtel, S.A.B. de C.V.",
    "SERVER-MANIA": "SERVER-MANIA",
    "Sify Limited": "Sify Limited",
    "MTS PJSC": "MTS PJSC",
    "Iran Telecommunication Company PJS": "Iran Telecommunication Company PJS",
    "MICROSOFT-CORP-MSN-AS-BLOCK": "MICROSOFT-CORP-MSN-AS-BLOCK",
    "AMAZON-AES": "AMAZON-AES",
    "China Networks Inter-Exchange": "China Networks Inter-Exchange",
    "ASN-QUADRANET-GLOBAL": "ASN-QUADRANET-GLOBAL",
    "Deutsche Telekom AG": "Deutsche Telekom AG",
    "Avatel Telecom, SA": "Avatel Telecom, SA",
    "Vodafone Net Iletisim Hizmetleri Anonim Sirketi": "Vodafone Net Iletisim Hizmetleri Anonim Sirketi",
    "CELLCO-PART": "CELLCO-PART",
    "Clouvider Limited": "Clouvider Limited",
    "British Telecommunications PLC": "British Telecommunications PLC",
    "BHARTI Airtel Ltd.": "BHARTI Airtel Ltd.",
    "COGECO-PEER1": "COGECO-PEER1",
    "Telecom Italia": "Telecom Italia",
    "ZEN-ECN": "ZEN-ECN",
}

O365_SERVICE_AREAS: Dict[str, str] = {
    "Exchange": "Exchange",
    "Skype": "Skype",
    "SharePoint": "SharePoint",
    "Common": "O365 Common",
}
