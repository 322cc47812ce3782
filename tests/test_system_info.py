from circlecore.system_info import SystemInfo


def test_system_info():
    info = SystemInfo()
    assert info.hostname
    assert info.kernel
    assert info.os_version == "1.0.0"
    assert info.cpu_cores > 0
    assert info.total_memory > 0


def test_refresh_emits_updated():
    info = SystemInfo()
    calls = []
    info.updated.connect(lambda: calls.append(True))
    info.refresh()
    assert calls == [True]
    assert info.os_version == "1.0.0"


def test_refresh_is_stable():
    info = SystemInfo()
    before = (info.hostname, info.kernel, info.cpu_cores, info.total_memory)
    info.refresh()
    assert (info.hostname, info.kernel, info.cpu_cores, info.total_memory) == before