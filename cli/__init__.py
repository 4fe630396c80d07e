"""cli - mackerel-agent 플러그인 명령줄 인터페이스"""
