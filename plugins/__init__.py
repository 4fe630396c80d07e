"""plugins - 서비스별 CloudWatch 메트릭 플러그인"""
