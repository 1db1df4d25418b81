# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
REST API routes that expose PjLinkClient operations.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..internal_types import *
from .. import (
    __version__ as pkg_version,
    PjLinkClient,
    PowerState,
    InputSource,
    MuteState,
    get_power_description,
    get_input_description,
    get_mute_description,
    get_severity_description,
  )

router = APIRouter()

def get_projector_client(request: Request) -> PjLinkClient:
    return request.app.state.pjlink_client

def _power_jsonable(state: PowerState) -> JsonableDict:
    return dict(power=state.name, description=get_power_description(state))

def _input_jsonable(source: InputSource) -> JsonableDict:
    return dict(input=source.name, code=source.value, description=get_input_description(source))

def _mute_jsonable(state: MuteState) -> JsonableDict:
    return dict(
        mute=state.name,
        code=state.value,
        is_on=state.is_on,
        description=get_mute_description(state),
      )

@router.get("/")
async def get_root(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return dict(version=pkg_version, projector=client.config.to_jsonable())

@router.post("/authenticate")
async def authenticate(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return dict(authenticated=await client.authenticate())

@router.get("/power")
async def get_power(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _power_jsonable(await client.get_power_status())

@router.post("/power/on")
async def power_on(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _power_jsonable(await client.power_on())

@router.post("/power/off")
async def power_off(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _power_jsonable(await client.power_off())

@router.get("/input")
async def get_input(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _input_jsonable(await client.get_input())

@router.get("/inputs")
async def get_inputs(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    inputs = await client.get_available_inputs()
    if inputs is None:
        return dict(supported=False, inputs=[])
    return dict(supported=True, inputs=[_input_jsonable(source) for source in inputs])

@router.put("/input/{code}")
async def set_input(code: int, client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _input_jsonable(await client.set_input(code))

@router.get("/mute")
async def get_mute(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _mute_jsonable(await client.get_mute_status())

@router.put("/mute/{code}")
async def set_mute(code: int, client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return _mute_jsonable(await client.set_mute(code))

@router.get("/errors")
async def get_errors(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    status = await client.get_error_status()
    return dict(
        (name, dict(value=value, description=get_severity_description(value)))
        for name, value in status.as_dict().items()
      )

@router.get("/lamps")
async def get_lamps(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    lamps = await client.get_lamp_infos()
    return dict(lamps=[dict(hours=lamp.hours, is_on=lamp.is_on) for lamp in lamps])

@router.get("/info")
async def get_info(client: PjLinkClient = Depends(get_projector_client)) -> Dict[str, Any]:
    return dict(
        name=await client.get_projector_name(),
        manufacturer=await client.get_manufacturer_name(),
        product=await client.get_product_name(),
        other=await client.get_other_info(),
        pjlink_class=await client.get_class_info(),
      )
