# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse

from uas import handlers
from uas.auth.accounts import AccountStore
from uas.auth.session import COOKIE_NAME, SessionState, sign_session
from uas.logging_config import configure_logging
from uas.permissions import cookie_settings, current_session, session_from_request

configure_logging()


def _respond(reply: handlers.Reply, before: SessionState) -> JSONResponse:
    resp = JSONResponse(status_code=reply.status_code, content=reply.body)
    if reply.session == before:
        return resp
    if reply.session.authenticated:
        resp.set_cookie(
            COOKIE_NAME,
            sign_session(reply.session),
            max_age=int(os.getenv("UAS_SESSION_MAX_AGE", "28800")),
            **cookie_settings(),
        )
    else:
        resp.delete_cookie(COOKIE_NAME)
    return resp


def create_app(store: Optional[AccountStore] = None) -> FastAPI:
    store = store if store is not None else AccountStore()
    api = FastAPI(title="User Account Service")
    api.state.store = store

    @api.middleware("http")
    async def _session_middleware(request: Request, call_next):
        request.state.session = session_from_request(request)
        return await call_next(request)

    # ------------------ Routes ------------------

    @api.post("/signup")
    def signup_post(
        request: Request,
        username: str = Form(""),
        password: str = Form(""),
        firstname: str = Form(""),
        lastname: str = Form(""),
    ):
        session = current_session(request)
        reply = handlers.sign_up(
            store,
            session=session,
            username=username,
            password=password,
            firstname=firstname,
            lastname=lastname,
        )
        return _respond(reply, session)

    @api.post("/login")
    def login_post(
        request: Request,
        username: str = Form(""),
        password: str = Form(""),
    ):
        session = current_session(request)
        reply = handlers.login(store, session=session, username=username, password=password)
        return _respond(reply, session)

    @api.get("/check-auth")
    def check_auth(request: Request):
        session = current_session(request)
        return _respond(handlers.profile(store, session=session), session)

    @api.api_route("/logout", methods=["GET", "POST"])
    def logout(request: Request):
        session = current_session(request)
        return _respond(handlers.logout(session=session), session)

    return api


app = create_app()
