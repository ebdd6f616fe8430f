import os

from vw_id_api import IdApi, Token, TokenIdentity
from vw_id_api.lib.logging import get_logger

logger = get_logger("vw_id_api")

access_token = os.getenv("VW_ID_ACCESS_TOKEN")
vin = os.getenv("VW_ID_VIN")

api = IdApi(TokenIdentity(Token(access_token=access_token)), logger=logger)
vins = api.get_vehicles()
print(vins)
status = api.get_status(vin or vins[0])
print(status)
# print(api.fetch_any("https://mobileapi.apps.emea.vwapps.io/vehicles/%s/parkingposition", vin))
