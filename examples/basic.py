"""
An example that lists the guilds a bot is in, and greets the first channel of each.
"""

# First, the required imports
import logging
import os

import anyio

from kaiheila import APIError, HTTPClient, PageSetting, Session
from kaiheila.core.session import TRACE


async def main():
    # The session holds the token and the HTTP transport. It can be shared by any number of
    # requests at once.
    session = Session.for_bot(os.environ["KAIHEILA_TOKEN"], timeout=10)
    http = HTTPClient(session)

    me = await http.get_me()
    print("Logged in as {}".format(me.name))

    # List endpoints take a PageSetting. Fields left as None aren't sent.
    guilds, meta = await http.list_guilds(PageSetting(page=1, page_size=20))
    print("In {} guild(s), page {} of {}".format(len(guilds), meta.page, meta.page_total))

    for guild in guilds:
        channels, _ = await http.list_channels(guild.id)
        if not channels:
            continue

        try:
            await http.create_message(channels[0].id, "Hello from {}!".format(me.username))
        except APIError as e:
            # The platform rejected the request; the code says why.
            print("Could not send to {}: {}".format(guild.name, e))


if __name__ == "__main__":
    # Set the level to TRACE to see every request and response.
    logging.basicConfig(level=TRACE)
    anyio.run(main)
