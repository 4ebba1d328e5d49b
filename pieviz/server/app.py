# pieviz/server/app.py — FastAPI app

from dotenv import load_dotenv, find_dotenv
from fastapi import FastAPI

load_dotenv(find_dotenv())

# Routers
from pieviz.server.pie_routes import router as pie_router

app = FastAPI(title="PieViz")

app.include_router(pie_router)             # /pie/svg, /pie/layout

# Optional health root
@app.get("/")
def root():
    return {"ok": True, "msg": "PieViz running"}
