import asyncio

from vouch import describe, expect, it


async def body():
    await asyncio.sleep(0)

    @it("registered after the body suspended")
    def late():
        expect(True).to_be_truthy()


describe("Async body", body)
describe("", lambda: it("", lambda: None))
