import asyncio

from quizkey.countdown import Countdown


def test_ticks_until_callback_stops():
    async def scenario():
        ticks = []

        def on_tick():
            ticks.append(len(ticks) + 1)
            return len(ticks) < 3

        countdown = Countdown(interval=0.01)
        countdown.start(on_tick)
        assert countdown.is_running
        await asyncio.sleep(0.2)
        assert ticks == [1, 2, 3]
        assert not countdown.is_running

    asyncio.run(scenario())


def test_cancel_stops_pending_tick():
    async def scenario():
        ticks = []
        countdown = Countdown(interval=0.05)
        countdown.start(lambda: ticks.append(1) or True)
        countdown.cancel()
        countdown.cancel()
        await asyncio.sleep(0.15)
        assert ticks == []
        assert not countdown.is_running

    asyncio.run(scenario())


def test_restart_replaces_previous_countdown():
    async def scenario():
        first, second = [], []
        countdown = Countdown(interval=0.01)
        countdown.start(lambda: first.append(1) or True)
        countdown.start(lambda: second.append(1) or len(second) < 2)
        await asyncio.sleep(0.1)
        assert first == []
        assert second == [1, 1]

    asyncio.run(scenario())


def test_callback_may_cancel_its_own_countdown():
    async def scenario():
        ticks = []
        countdown = Countdown(interval=0.01)

        def on_tick():
            ticks.append(1)
            countdown.cancel()
            return True

        countdown.start(on_tick)
        await asyncio.sleep(0.1)
        assert ticks == [1]
        assert not countdown.is_running

    asyncio.run(scenario())
